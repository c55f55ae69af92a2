"""
Yacht - Game Engine Base Definitions

This module defines the fixed rule constants, the scoring category catalog
and the entry states used throughout the game engine. None of these values
are configurable: the category set, bonus thresholds and die face count are
part of the game's design.
"""

from enum import Enum, auto


NUM_DICE = 5
NUM_FACES = 6
MAX_ROLLS = 3

UPPER_BONUS = 35
UPPER_BONUS_THRESHOLD = 62  # Bonus applies when the upper sum exceeds this

FULL_HOUSE_SCORE = 25
SMALL_STRAIGHT_SCORE = 30
LARGE_STRAIGHT_SCORE = 40
FIVE_OF_A_KIND_SCORE = 50


class Category(Enum):
    """The 13 scoring categories, in scorecard order."""
    ONES = auto()
    TWOS = auto()
    THREES = auto()
    FOURS = auto()
    FIVES = auto()
    SIXES = auto()
    THREE_OF_A_KIND = auto()
    FOUR_OF_A_KIND = auto()
    FULL_HOUSE = auto()
    SMALL_STRAIGHT = auto()
    LARGE_STRAIGHT = auto()
    FIVE_OF_A_KIND = auto()
    CHANCE = auto()

    @property
    def display_name(self) -> str:
        """Short human-readable label used on the scorecard."""
        return _DISPLAY_NAMES[self]

    @property
    def is_upper(self) -> bool:
        return self in UPPER_SECTION

    @property
    def index(self) -> int:
        """Position of the category in scorecard order."""
        return CATEGORIES.index(self)

    def __str__(self) -> str:
        return self.display_name


class EntryState(Enum):
    """Recorded state of a single scoreboard category."""
    OPEN = auto()
    FILLED = auto()
    JOKER = auto()  # Five of a Kind filled with a positive score


class CategoryUnavailableError(ValueError):
    """Raised when a category is chosen that cannot accept a score."""


CATEGORIES: tuple[Category, ...] = tuple(Category)

UPPER_SECTION: tuple[Category, ...] = (
    Category.ONES,
    Category.TWOS,
    Category.THREES,
    Category.FOURS,
    Category.FIVES,
    Category.SIXES,
)

LOWER_SECTION: tuple[Category, ...] = (
    Category.THREE_OF_A_KIND,
    Category.FOUR_OF_A_KIND,
    Category.FULL_HOUSE,
    Category.SMALL_STRAIGHT,
    Category.LARGE_STRAIGHT,
    Category.FIVE_OF_A_KIND,
    Category.CHANCE,
)

_DISPLAY_NAMES: dict[Category, str] = {
    Category.ONES: "⚀ 1s",
    Category.TWOS: "⚁ 2s",
    Category.THREES: "⚂ 3s",
    Category.FOURS: "⚃ 4s",
    Category.FIVES: "⚄ 5s",
    Category.SIXES: "⚅ 6s",
    Category.THREE_OF_A_KIND: "3 of a Kind",
    Category.FOUR_OF_A_KIND: "4 of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.SMALL_STRAIGHT: "Small Straight",
    Category.LARGE_STRAIGHT: "Large Straight",
    Category.FIVE_OF_A_KIND: "5 of a Kind",
    Category.CHANCE: "Chance",
}


def display_name(category: Category) -> str:
    """Return the scorecard label for a category."""
    return _DISPLAY_NAMES[category]


def upper_face(category: Category) -> int:
    """
    Return the 0-indexed die face counted by an upper-section category.

    Raises:
        ValueError: If the category is not in the upper section
    """
    if category not in UPPER_SECTION:
        raise ValueError(f"{category.name} is not an upper-section category.")
    return UPPER_SECTION.index(category)
