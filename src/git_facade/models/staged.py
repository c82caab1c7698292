"""Staged file mapping model."""

from typing import Dict, List

# Revision id -> staged file paths, in discovery order.
StagedFileMap = Dict[str, List[str]]
