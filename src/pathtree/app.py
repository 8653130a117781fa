"""Streamlit UI for pathtree."""

from __future__ import annotations

import streamlit as st

from pathtree.models import Options
from pathtree.status_parser import parse_lines
from pathtree.tree_renderer import generate_tree

_PREVIEW_MAX_LINES = 1000


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def _qp_flag(key: str, default: bool = False) -> bool:
    raw = _qp(key)
    if not raw:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def main() -> None:
    st.set_page_config(
        page_title="pathtree",
        page_icon="🌳",
        layout="wide",
    )
    st.title("pathtree")
    st.caption(
        "Paste a list of paths or `git status --porcelain` output "
        "to see it as a directory tree."
    )

    raw = st.text_area(
        "Paths",
        height=240,
        placeholder="src/main.py\nsrc/utils.py\n?? notes.txt",
    )

    left, right = st.columns(2)
    with left:
        compact = st.toggle(
            "Compact",
            value=_qp_flag("compact"),
            help="Collapse chains of single-child directories into one line.",
        )
    with right:
        detect_status = st.toggle(
            "Parse status codes",
            value=_qp_flag("status", default=True),
            help="Strip leading porcelain status codes such as `M`, `??` or `R`.",
        )

    if not raw.strip():
        st.info("Enter at least one path.")
        return

    entries = parse_lines(raw.split("\n"), detect_status=detect_status)
    tree_text = generate_tree(entries, Options(compact=compact, color=False))
    _show_result(tree_text, len(entries))


def _show_result(tree_text: str, entry_count: int) -> None:
    """Display the rendered tree with a download button."""
    st.download_button(
        label="Download tree",
        data=tree_text,
        file_name="tree.txt",
        mime="text/plain",
        width="stretch",
    )

    preview_lines = tree_text.split("\n")
    with st.expander(f"Tree ({entry_count} paths)", expanded=True):
        if len(preview_lines) > _PREVIEW_MAX_LINES:
            st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language="text")
            st.caption(
                f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
                f"(total {len(preview_lines):,} lines). "
                "Download the file for the full content."
            )
        else:
            st.code(tree_text, language="text")


if __name__ == "__main__":
    main()
