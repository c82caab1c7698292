"""Parsers for plain-text git output."""

import re
from itertools import islice
from typing import List, Optional

from git_facade.models.commit import Commit, DiffType

# '+ <commit> <message>' or '- <commit> <message>'
CHERRY_LINE = re.compile(r"^(?P<marker>[+-])\s(?P<id>\S+)\s(?P<message>.*)$")


def parse_cherry_line(line: str) -> Optional[Commit]:
    """Parse one `git cherry -v` line, or return None if it does not match."""
    match = CHERRY_LINE.match(line)
    if match is None:
        return None
    return Commit(
        id=match.group("id"),
        message=match.group("message"),
        diff=DiffType.from_marker(match.group("marker")),
    )


def parse_cherry_output(output: str) -> List[Commit]:
    """Parse `git cherry -v` output, silently dropping non-matching lines.

    Order follows the git output. Messages are kept verbatim.
    """
    commits = []
    for line in output.split("\n"):
        commit = parse_cherry_line(line)
        if commit is not None:
            commits.append(commit)
    return commits


def parse_name_status(output: str) -> List[List[str]]:
    """Parse `git diff --name-status -z` output into per-record file lists.

    Fields are NUL-separated: a status, then one path, or two paths for
    renames and copies (``R<score>`` / ``C<score>``). Paths are verbatim,
    never C-quoted. The status is dropped.
    """
    fields = iter(field for field in output.split("\0") if field)
    records = []
    for status in fields:
        count = 2 if status[:1] in ("R", "C") else 1
        files = list(islice(fields, count))
        if files:
            records.append(files)
    return records
