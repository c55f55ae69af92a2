"""Dice tray component — renders dice with per-die re-roll markers."""

from __future__ import annotations

import streamlit as st

from yacht.input.events import ActionEvent, GameAction

# Unicode die faces, indexed by pip count - 1
_DIE_GLYPHS = ("⚀", "⚁", "⚂", "⚃", "⚄", "⚅")


def render_dice_tray(
    dice: tuple[int, ...],
    held: tuple[bool, ...],
    roll_count: int,
    can_mark: bool,
) -> ActionEvent | None:
    """Render the five dice with interactive mark buttons.

    Args:
        dice: Pip values in slot order.
        held: Per-slot "marked for re-roll" flags.
        roll_count: Current roll number (used in button keys).
        can_mark: Whether marking dice does anything (a re-roll remains).

    Returns:
        A TOGGLE_HOLD event for the clicked die, or ``None``.
    """
    html_parts = ['<div class="dice-tray">']
    for i, pips in enumerate(dice):
        classes = ["die"]
        if held[i]:
            classes.append("held")
        html_parts.append(
            f'<div class="{" ".join(classes)}">'
            f'<span class="slot">{i + 1}</span>{_DIE_GLYPHS[pips - 1]}'
            f"</div>"
        )
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    event: ActionEvent | None = None
    cols = st.columns(len(dice))
    for i, col in enumerate(cols):
        with col:
            label = "Keep" if held[i] else "Re-roll"
            key = f"mark_{i}_r{roll_count}"
            if st.button(
                label,
                key=key,
                use_container_width=True,
                disabled=not can_mark,
                type="primary" if held[i] else "secondary",
            ):
                event = ActionEvent(GameAction.TOGGLE_HOLD, slot=i)

    return event
