"""UI components for Yacht."""

from yacht.ui.components.dice_tray import render_dice_tray
from yacht.ui.components.scorecard import render_scorecard
from yacht.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_dice_tray",
    "render_scorecard",
    "render_turn_controls",
]
