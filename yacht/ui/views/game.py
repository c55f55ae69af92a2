"""Game page — dice tray, turn controls and the scorecard."""

from __future__ import annotations

import logging
import random

import streamlit as st

from yacht.config.settings import get_settings
from yacht.engine.base import Category
from yacht.engine.game import GameSession
from yacht.input.events import ActionEvent, GameAction, apply_action
from yacht.ui.components.dice_tray import render_dice_tray
from yacht.ui.components.scorecard import render_scorecard
from yacht.ui.components.turn_controls import render_turn_controls
from yacht.ui.themes.animations import render_joker_banner, render_score_popup

logger = logging.getLogger(__name__)


def new_session() -> GameSession:
    """Start a fresh game, seeded when ``RNG_SEED`` is configured."""
    seed = get_settings().rng_seed
    rng = random.Random(seed) if seed is not None else None
    return GameSession(rng=rng)


def get_session() -> GameSession:
    """Return the session stored in Streamlit state, creating it on first use."""
    ss = st.session_state
    if "game" not in ss:
        ss["game"] = new_session()
    return ss["game"]


def render_game_page() -> None:
    """Render the main game page."""
    ss = st.session_state
    session = get_session()

    if session.is_finished:
        ss["page"] = "results"
        st.rerun()
        return

    snapshot = session.snapshot()

    last = ss.pop("_last_scored", None)
    if last is not None:
        category, points, was_joker = last
        if was_joker:
            render_joker_banner()
        render_score_popup(points, category.display_name)

    game_col, score_col = st.columns([3, 2])

    event: ActionEvent | None = None
    with game_col:
        st.subheader(snapshot.roll_label)
        toggled = render_dice_tray(
            dice=snapshot.dice,
            held=snapshot.held,
            roll_count=snapshot.roll_count,
            can_mark=not session.is_final_roll,
        )
        controls = render_turn_controls(snapshot)
        event = toggled or controls

    with score_col:
        render_scorecard(snapshot)

    if event is not None:
        _dispatch(session, event)


def _dispatch(session: GameSession, event: ActionEvent) -> None:
    """Apply a UI event and rerun when the session changed."""
    category = session.selected_category
    was_joker = (
        category == Category.FIVE_OF_A_KIND
        and session.recorded_score(category) is not None
    )
    points = session.potential_score(category) if category is not None else 0

    if not apply_action(session, event):
        logger.debug("Event %s had no effect", event.action.name)
        return

    if event.action == GameAction.COMMIT:
        st.session_state["_last_scored"] = (category, points, was_joker)
    st.rerun()
