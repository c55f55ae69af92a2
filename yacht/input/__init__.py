"""
Yacht Input Handling.

Player action definitions and their dispatch onto a game session.
"""

from yacht.input.events import (
    ActionEvent,
    GameAction,
    apply_action,
    classify_key,
    parse_dice_number,
)

__all__ = [
    "ActionEvent",
    "GameAction",
    "apply_action",
    "classify_key",
    "parse_dice_number",
]
