"""Scorecard theme for Yacht."""

from yacht.ui.themes.animations import (
    load_css,
    render_final_score_animation,
    render_joker_banner,
    render_score_popup,
)

__all__ = [
    "load_css",
    "render_final_score_animation",
    "render_joker_banner",
    "render_score_popup",
]
