"""CSS injection and HTML animation helpers for the scorecard theme."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the scorecard CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "scorecard.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_score_popup(points: int, category_name: str) -> None:
    """Render an animated popup for the category just scored."""
    st.markdown(
        f'<div class="score-popup">+{points} &middot; {category_name}</div>',
        unsafe_allow_html=True,
    )


def render_joker_banner() -> None:
    """Render the banner shown when another five of a kind stacks a bonus."""
    st.markdown(
        '<div class="joker-banner">'
        "&#9733; FIVE OF A KIND AGAIN! Bonus added to 5 of a Kind &#9733;"
        "</div>",
        unsafe_allow_html=True,
    )


def render_final_score_animation(total: int) -> None:
    """Render the final score overlay with glow animation."""
    st.markdown(
        '<div class="final-overlay">'
        "<h1>Game Over</h1>"
        f'<p class="final-score">{total} points</p>'
        "</div>",
        unsafe_allow_html=True,
    )
