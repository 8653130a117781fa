"""Split raw path strings into tree segments."""

from __future__ import annotations

import re

# "C:\" or "C:/" at the very start of a path
_DRIVE_RE = re.compile(r"^[A-Za-z]:[\\/]")
_SEP_RE = re.compile(r"[\\/]+")


def normalize_path(raw: str) -> list[str]:
    """Return the segment names of *raw*, root and drive markers removed.

    Both ``/`` and ``\\`` are treated as separators. Empty segments are
    dropped, and so is ``.`` unless it starts a relative path (``find .``
    output keeps its ``.`` root). ``..`` is kept as an ordinary name.

    Examples:
        "src/main.py"        -> ["src", "main.py"]
        "./src/main.py"      -> [".", "src", "main.py"]
        "/etc/hosts"         -> ["etc", "hosts"]
        "C:\\Users\\me\\a.txt" -> ["Users", "me", "a.txt"]
        "/"                  -> []
    """
    path, drives = _DRIVE_RE.subn("", raw, count=1)
    parts = _SEP_RE.split(path)
    # a rooted path splits with an empty first part, so index 0 is never "."
    leading_dot = not drives and parts[0] == "."
    return [
        part
        for i, part in enumerate(parts)
        if part and (part != "." or (i == 0 and leading_dot))
    ]
