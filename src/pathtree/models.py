"""Data classes for pathtree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class FileNode:
    status: str | None = None


@dataclass
class DirectoryNode:
    children: dict[str, Node] = field(default_factory=dict)


Node = FileNode | DirectoryNode


class EntryKind(Enum):
    INDENT = "indent"
    CONNECTOR = "connector"
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class LineEntry:
    """One rendered fragment; only DIRECTORY and FILE entries end a line."""

    kind: EntryKind
    text: str
    status: str | None = None  # FILE only

    @property
    def ends_line(self) -> bool:
        return self.kind in (EntryKind.DIRECTORY, EntryKind.FILE)


class ColorMode(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


@dataclass
class Options:
    compact: bool = False
    color: bool = False
