"""Split ``git status --porcelain`` style lines into (path, status) pairs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

# Characters git uses in the two-column XY status code
STATUS_CHARS = frozenset(" MTADRCU?!")
RENAME_SEPARATOR = " -> "


def parse_status_line(line: str) -> tuple[str, str | None]:
    """Parse a single input line.

    Supported formats:
      - ``path/to/file``            -> ("path/to/file", None)
      - `` M path/to/file``         -> ("path/to/file", "M")
      - ``?? new.txt``              -> ("new.txt", "??")
      - ``R  old.txt -> new.txt``   -> ("new.txt", "R")

    A line that does not start with a status code is returned as a bare
    path, so plain path lists and porcelain output can be mixed.
    """
    line = line.rstrip("\r\n")
    if len(line) < 4 or line[2] != " ":
        return line, None

    code = line[:2]
    if not all(ch in STATUS_CHARS for ch in code) or code == "  ":
        return line, None

    path = line[3:]
    if ("R" in code or "C" in code) and RENAME_SEPARATOR in path:
        path = path.rsplit(RENAME_SEPARATOR, 1)[1]

    return path, code.strip()


def parse_lines(
    lines: Iterable[str],
    detect_status: bool = True,
) -> list[tuple[str, str | None]]:
    """Turn raw input lines into (path, status) pairs, dropping blank lines."""
    entries: list[tuple[str, str | None]] = []
    for line in lines:
        if not line.strip():
            logger.debug("Skipping blank line")
            continue
        if detect_status:
            entries.append(parse_status_line(line))
        else:
            entries.append((line.rstrip("\r\n"), None))
    return entries
