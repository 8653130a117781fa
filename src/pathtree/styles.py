"""ANSI styles for directory, connector and per-status file labels."""

from __future__ import annotations

STYLES: dict[str, str] = {
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "bold_red": "1;31",
    "bright_black": "90",
}

RESET = "\033[0m"

DIRECTORY_STYLE = "blue"
MUTED_STYLE = "bright_black"

# Porcelain status code → style; anything else is left unstyled
STATUS_STYLES: dict[str, str] = {
    "M": "yellow",
    "A": "green",
    "D": "red",
    "R": "cyan",
    "C": "magenta",
    "U": "bold_red",
    "??": MUTED_STYLE,
}


def colorize(text: str, style: str | None) -> str:
    """Wrap *text* in the escape codes for *style*.

    Empty text is still wrapped so every fragment has the same shape.
    ``None`` or an unknown style returns *text* unchanged.
    """
    code = STYLES.get(style) if style else None
    if code is None:
        return text
    return f"\033[{code}m{text}{RESET}"


def status_style(status: str | None) -> str | None:
    """Return the style name for a file with *status*, or None."""
    if status is None:
        return None
    return STATUS_STYLES.get(status)
