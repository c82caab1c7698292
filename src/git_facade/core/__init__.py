"""Core git command execution and parsing."""
