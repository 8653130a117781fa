"""Render a directory tree as ``tree``-style text."""

from __future__ import annotations

from collections.abc import Iterable

from pathtree.models import (
    DirectoryNode,
    EntryKind,
    LineEntry,
    Node,
    Options,
)
from pathtree.styles import (
    DIRECTORY_STYLE,
    MUTED_STYLE,
    colorize,
    status_style,
)
from pathtree.tree_builder import build_tree

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def compact_chain(name: str, node: Node) -> tuple[str, Node]:
    """Fold single-child directory chains into one ``a/b/c`` label.

    Returns the joined label and the node whose children should be
    rendered. A chain stops at a directory with zero or several children,
    or whose only child is a file.
    """
    label = name
    while isinstance(node, DirectoryNode) and len(node.children) == 1:
        child_name, child = next(iter(node.children.items()))
        if not isinstance(child, DirectoryNode):
            break
        label = f"{label}/{child_name}"
        node = child
    return label, node


def _level(tree: DirectoryNode, compact: bool) -> list[tuple[str, Node, bool]]:
    """Return (label, node, is_last) for each child, last child first."""
    names = sorted(tree.children)
    level = []
    for i, name in enumerate(names):
        node = tree.children[name]
        label = name
        if compact:
            label, node = compact_chain(name, node)
        level.append((label, node, i == len(names) - 1))
    level.reverse()
    return level


def render(
    tree: DirectoryNode,
    compact: bool = False,
    prefix: str = "",
) -> list[LineEntry]:
    """Flatten *tree* into indent / connector / label fragments.

    Children are visited in ascending name order at every level. The walk
    keeps its own stack, so tree depth is not bounded by recursion limits.
    """
    entries: list[LineEntry] = []
    stack = [(_level(tree, compact), prefix)]
    while stack:
        level, prefix = stack[-1]
        if not level:
            stack.pop()
            continue
        label, node, is_last = level.pop()

        entries.append(LineEntry(EntryKind.INDENT, prefix))
        entries.append(
            LineEntry(EntryKind.CONNECTOR, LAST_BRANCH if is_last else BRANCH)
        )

        if isinstance(node, DirectoryNode):
            entries.append(LineEntry(EntryKind.DIRECTORY, label))
            extension = SPACE if is_last else PIPE
            stack.append((_level(node, compact), prefix + extension))
        else:
            entries.append(LineEntry(EntryKind.FILE, label, node.status))
    return entries


def format_entries(entries: Iterable[LineEntry], color: bool = False) -> str:
    """Join rendered fragments into text, styling them when *color* is set."""
    parts: list[str] = []
    for entry in entries:
        text = entry.text
        if color:
            if entry.kind is EntryKind.DIRECTORY:
                text = colorize(text, DIRECTORY_STYLE)
            elif entry.kind is EntryKind.FILE:
                text = colorize(text, status_style(entry.status))
            else:
                text = colorize(text, MUTED_STYLE)
        parts.append(text)
        if entry.ends_line:
            parts.append("\n")
    return "".join(parts)


def generate_tree(
    paths_with_status: Iterable[tuple[str, str | None]],
    options: Options | None = None,
) -> str:
    """Build and render a tree from (path, status) pairs in one pass."""
    options = options or Options()
    tree = build_tree(paths_with_status)
    return format_entries(render(tree, options.compact), options.color)
