"""Turn control buttons — cursor movement, re-roll and category commit."""

from __future__ import annotations

import streamlit as st

from yacht.engine.game import TurnSnapshot
from yacht.input.events import ActionEvent, GameAction


def render_turn_controls(snapshot: TurnSnapshot) -> ActionEvent | None:
    """Render contextual turn-action buttons.

    Returns:
        The ActionEvent for the clicked button, or ``None`` if no action taken.
    """
    if snapshot.is_finished:
        return None

    nav_cols = st.columns(4)
    nav_buttons = (
        ("Top", GameAction.CURSOR_HOME),
        ("Up", GameAction.CURSOR_UP),
        ("Down", GameAction.CURSOR_DOWN),
        ("Bottom", GameAction.CURSOR_END),
    )
    for col, (label, action) in zip(nav_cols, nav_buttons):
        with col:
            if st.button(label, key=f"btn_{action.name.lower()}", use_container_width=True):
                return ActionEvent(action)

    cols = st.columns(2)

    with cols[0]:
        if st.button(
            "Roll Marked Dice",
            key="btn_reroll",
            use_container_width=True,
            disabled=not snapshot.can_reroll,
        ):
            return ActionEvent(GameAction.REROLL)

    with cols[1]:
        selected = snapshot.selected
        label = f"Score {selected.display_name}" if selected else "Score"
        if st.button(
            label,
            key="btn_commit",
            use_container_width=True,
            type="primary",
        ):
            return ActionEvent(GameAction.COMMIT)

    return None
