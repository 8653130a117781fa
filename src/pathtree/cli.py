"""Command-line filter: read paths on stdin, print a tree on stdout."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TextIO

from pathtree.models import ColorMode, Options
from pathtree.status_parser import parse_lines
from pathtree.tree_renderer import generate_tree

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class PathTreeError(Exception):
    """Raised when the input cannot be turned into a tree."""


def _package_version() -> str:
    try:
        return version("pathtree")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathtree",
        description=(
            "Render newline-separated paths (or `git status --porcelain` "
            "output) from stdin as a directory tree."
        ),
    )
    p.add_argument(
        "-c", "--compact",
        action="store_true",
        default=None,
        help="Collapse chains of single-child directories into one line.",
    )
    p.add_argument(
        "--color",
        nargs="?",
        const=ColorMode.ALWAYS.value,
        default=ColorMode.AUTO.value,
        choices=[m.value for m in ColorMode],
        help="Colorize output: auto (default, only on a terminal), always or never.",
    )
    p.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const=ColorMode.NEVER.value,
        help="Same as --color=never.",
    )
    p.add_argument(
        "--no-status",
        dest="detect_status",
        action="store_false",
        help="Treat every line as a plain path, never as a status line.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_package_version()}",
    )
    return p


def resolve_color(mode: ColorMode, stream: TextIO) -> bool:
    """Decide whether to emit ANSI colors for *stream*."""
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def resolve_options(args: argparse.Namespace, stream: TextIO) -> Options:
    compact = args.compact
    if compact is None:
        compact = os.environ.get("PATHTREE_COMPACT", "").strip().lower() in _TRUTHY
    return Options(
        compact=compact,
        color=resolve_color(ColorMode(args.color), stream),
    )


def read_lines(stream: TextIO) -> list[str]:
    """Read all of *stream* as UTF-8 and split it into lines."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream.read().split("\n")
    data = buffer.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PathTreeError(f"input is not valid UTF-8: {exc}") from exc
    return text.split("\n")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    options = resolve_options(args, sys.stdout)
    logger.debug("Options: %s", options)

    try:
        lines = read_lines(sys.stdin)
    except PathTreeError as exc:
        logger.debug("Failed to read input", exc_info=True)
        print(f"pathtree: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    entries = parse_lines(lines, detect_status=args.detect_status)
    logger.debug("Read %d entries", len(entries))

    try:
        sys.stdout.write(generate_tree(entries, options))
        sys.stdout.flush()
    except BrokenPipeError:
        # Downstream closed early (e.g. `| head`); silence the flush at exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0


if __name__ == "__main__":
    sys.exit(main())
