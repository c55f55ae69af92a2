"""
Yacht - Input Event Definitions

Discrete player actions and their dispatch onto a GameSession. Whatever
captures input (a key reader, Streamlit buttons) turns it into an
ActionEvent; ``apply_action`` is the only place events reach the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from yacht.engine.base import NUM_DICE
from yacht.engine.game import GameSession


class GameAction(Enum):
    """Actions a player can take."""

    TOGGLE_HOLD = auto()
    REROLL = auto()
    CURSOR_UP = auto()
    CURSOR_DOWN = auto()
    CURSOR_HOME = auto()
    CURSOR_END = auto()
    COMMIT = auto()
    QUIT = auto()


@dataclass(frozen=True)
class ActionEvent:
    """A single player action; ``slot`` is set only for TOGGLE_HOLD."""

    action: GameAction
    slot: int | None = None

    def __post_init__(self) -> None:
        if self.action == GameAction.TOGGLE_HOLD and self.slot is None:
            raise ValueError("TOGGLE_HOLD requires a die slot.")


# Key names follow the terminal bindings: arrows, vi keys and WASD
_KEY_ACTION_MAP: dict[str, GameAction] = {
    "esc": GameAction.QUIT,
    "ctrl+c": GameAction.QUIT,
    "q": GameAction.QUIT,
    "up": GameAction.CURSOR_UP,
    "k": GameAction.CURSOR_UP,
    "w": GameAction.CURSOR_UP,
    "down": GameAction.CURSOR_DOWN,
    "j": GameAction.CURSOR_DOWN,
    "s": GameAction.CURSOR_DOWN,
    "home": GameAction.CURSOR_HOME,
    "end": GameAction.CURSOR_END,
    "enter": GameAction.COMMIT,
    " ": GameAction.COMMIT,
    "space": GameAction.COMMIT,
    "r": GameAction.REROLL,
}


def parse_dice_number(key: str) -> int | None:
    """Map a digit key ``"1"``-``"5"`` to a 0-indexed die slot."""
    if len(key) == 1 and key.isdigit():
        number = int(key)
        if 0 < number <= NUM_DICE:
            return number - 1
    return None


def classify_key(key: str) -> ActionEvent | None:
    """Determine the action for a key name, or None if the key is unbound."""
    slot = parse_dice_number(key)
    if slot is not None:
        return ActionEvent(GameAction.TOGGLE_HOLD, slot=slot)

    action = _KEY_ACTION_MAP.get(key.lower())
    if action is None:
        return None
    return ActionEvent(action)


def apply_action(session: GameSession, event: ActionEvent) -> bool:
    """
    Apply an event to a session.

    Returns:
        True if the session changed. QUIT never changes the session; the
        caller decides how to exit.
    """
    action = event.action
    if action == GameAction.TOGGLE_HOLD:
        return session.toggle_hold(event.slot)
    if action == GameAction.REROLL:
        return session.reroll()
    if action == GameAction.CURSOR_UP:
        return session.move_up()
    if action == GameAction.CURSOR_DOWN:
        return session.move_down()
    if action == GameAction.CURSOR_HOME:
        return session.move_home()
    if action == GameAction.CURSOR_END:
        return session.move_end()
    if action == GameAction.COMMIT:
        return session.commit()
    return False
