"""ABOUTME: Reusable UI components for displaying type analysis results.
ABOUTME: Renders colored type badges and the weakness/resistance lists."""

from collections.abc import Sequence
from html import escape

import streamlit as st

from typeanalyzer.config import DisplayConfig
from typeanalyzer.core.report import TypeMultiplier, format_multiplier


def type_badge_html(type_name: str, display: DisplayConfig) -> str:
    """Build the HTML for one colored type badge.

    Args:
        type_name: Type name (e.g., "fire").
        display: Type display configuration.

    Returns:
        Inline-styled HTML span.
    """
    color = escape(display.color_for(type_name), quote=True)
    return (
        f'<span style="background-color:{color};color:white;font-weight:600;'
        f'padding:2px 12px;border-radius:999px;margin-right:4px;">{escape(type_name)}</span>'
    )


def render_type_badges(type_names: Sequence[str], display: DisplayConfig) -> None:
    """Render the Pokemon's own types as a row of badges."""
    badges = "".join(type_badge_html(type_name, display) for type_name in type_names)
    st.markdown(badges, unsafe_allow_html=True)


def render_multiplier_list(
    title: str,
    entries: Sequence[TypeMultiplier],
    display: DisplayConfig,
    empty_message: str,
) -> None:
    """Render a titled list of (type, multiplier) rows.

    Args:
        title: Section header.
        entries: Sorted (type, multiplier) pairs.
        display: Type display configuration.
        empty_message: Text shown when there are no entries.
    """
    st.subheader(title)
    if not entries:
        st.caption(f"_{empty_message}_")
        return

    for type_name, multiplier in entries:
        cols = st.columns([0.4, 0.6])
        cols[0].markdown(type_badge_html(type_name, display), unsafe_allow_html=True)
        cols[1].write(format_multiplier(multiplier))
