"""Results page — final score and scorecard."""

from __future__ import annotations

import streamlit as st

from yacht.ui.components.scorecard import render_scorecard
from yacht.ui.themes.animations import render_final_score_animation
from yacht.ui.views.game import get_session, new_session


def render_results_page() -> None:
    """Render the final results page."""
    ss = st.session_state
    session = get_session()

    if not session.is_finished:
        ss["page"] = "game"
        st.rerun()
        return

    snapshot = session.snapshot()
    render_final_score_animation(snapshot.grand_total)

    st.subheader("Final Scorecard")
    render_scorecard(snapshot)

    st.divider()

    if st.button("Play Again", type="primary", use_container_width=True):
        _play_again()


def _play_again() -> None:
    """Discard the finished game and start a new one."""
    ss = st.session_state
    ss["game"] = new_session()
    ss.pop("_last_scored", None)
    ss["page"] = "game"
    st.rerun()
