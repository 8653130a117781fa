"""Fold (path, status) pairs into a directory tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pathtree.models import DirectoryNode, FileNode
from pathtree.path_normalizer import normalize_path

logger = logging.getLogger(__name__)


def insert(
    tree: DirectoryNode,
    segments: Sequence[str],
    status: str | None = None,
) -> None:
    """Add one path to *tree*.

    Intermediate segments become directories, the last one a file. The
    first writer wins: an existing node is never replaced, and a path that
    runs through an existing file is dropped from that point on.
    """
    if not segments:
        return

    node = tree
    for name in segments[:-1]:
        child = node.children.setdefault(name, DirectoryNode())
        if isinstance(child, FileNode):
            logger.debug(
                "Not descending into file %r for %s", name, "/".join(segments)
            )
            return
        node = child

    leaf = segments[-1]
    if leaf in node.children:
        logger.debug("Keeping existing entry for %s", "/".join(segments))
        return
    node.children[leaf] = FileNode(status=status)


def build_tree(entries: Iterable[tuple[str, str | None]]) -> DirectoryNode:
    """Build a tree from (path, status) pairs in input order.

    Blank paths are skipped. Input order only decides which status is kept
    when the same path appears more than once.
    """
    tree = DirectoryNode()
    for path, status in entries:
        if not path.strip():
            continue
        insert(tree, normalize_path(path), status or None)
    return tree
