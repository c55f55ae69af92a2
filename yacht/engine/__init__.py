"""
Yacht Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, category scoring, the scoreboard and the turn state machine.
"""

from yacht.engine.base import (
    CATEGORIES,
    LOWER_SECTION,
    MAX_ROLLS,
    NUM_DICE,
    NUM_FACES,
    UPPER_SECTION,
    Category,
    CategoryUnavailableError,
    EntryState,
    display_name,
)
from yacht.engine.dice import DiceSet, Die
from yacht.engine.game import CategoryLine, GameSession, TurnSnapshot
from yacht.engine.scoreboard import Scoreboard, ScoreEntry
from yacht.engine.scoring import ScoringEngine

__all__ = [
    # Constants
    "CATEGORIES",
    "UPPER_SECTION",
    "LOWER_SECTION",
    "NUM_DICE",
    "NUM_FACES",
    "MAX_ROLLS",
    # Enums
    "Category",
    "EntryState",
    # Errors
    "CategoryUnavailableError",
    # Data Classes
    "Die",
    "DiceSet",
    "ScoreEntry",
    "CategoryLine",
    "TurnSnapshot",
    # Engines
    "ScoringEngine",
    "Scoreboard",
    "GameSession",
    "display_name",
]
