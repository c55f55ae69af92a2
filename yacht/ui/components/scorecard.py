"""Scorecard component — upper/lower sections with subtotals and cursor."""

from __future__ import annotations

import streamlit as st

from yacht.engine.base import LOWER_SECTION, UPPER_BONUS_THRESHOLD, UPPER_SECTION, Category
from yacht.engine.game import TurnSnapshot


def _category_row(snapshot: TurnSnapshot, category: Category) -> str:
    line = snapshot.line(category)
    classes = ["score-row"]
    marker = ""
    if line.selected:
        classes.append("selected")
        marker = "&gt; "
    elif line.available:
        classes.append("available")
    return (
        f'<div class="{" ".join(classes)}">'
        f'<span class="name">{marker}{category.display_name}</span>'
        f'<span class="score">{line.display_score}</span>'
        f"</div>"
    )


def _total_row(label: str, value: int) -> str:
    return (
        '<div class="score-row total">'
        f'<span class="name">{label}</span>'
        f'<span class="score">{value}</span>'
        "</div>"
    )


def render_scorecard(snapshot: TurnSnapshot) -> None:
    """Render the scorecard table.

    Open categories show what the current dice would score; the row under
    the cursor is marked with ``>``.
    """
    html = ['<div class="scorecard">']

    html.append('<div class="section-title">Upper Section</div>')
    html.extend(_category_row(snapshot, category) for category in UPPER_SECTION)
    html.append('<div class="separator"></div>')
    html.append(_total_row(f"Bonus if &gt; {UPPER_BONUS_THRESHOLD}", snapshot.upper_bonus))
    html.append(_total_row("Total", snapshot.upper_total))

    html.append('<div class="section-title">Lower Section</div>')
    html.extend(_category_row(snapshot, category) for category in LOWER_SECTION)
    html.append('<div class="separator"></div>')
    html.append(_total_row("Total", snapshot.lower_total))

    html.append(_total_row("Grand Total", snapshot.grand_total))
    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
