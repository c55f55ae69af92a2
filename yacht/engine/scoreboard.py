"""
Yacht - Scoreboard

Tracks the score recorded for each category. A category is filled exactly
once, with one exception: a Five of a Kind entry holding a positive score
accepts further five-of-a-kind rolls, which stack onto the existing entry
(the joker bonus).

Totals are derived from the current entries on every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from yacht.engine.base import (
    CATEGORIES,
    LOWER_SECTION,
    UPPER_BONUS,
    UPPER_BONUS_THRESHOLD,
    UPPER_SECTION,
    Category,
    CategoryUnavailableError,
    EntryState,
)
from yacht.engine.dice import DiceSet
from yacht.engine.validators import validate_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreEntry:
    """
    Recorded state of one category.

    Attributes:
        category: The category
        state: OPEN, FILLED or JOKER
        score: Recorded score (None while open)
    """
    category: Category
    state: EntryState
    score: int | None = None

    @property
    def is_open(self) -> bool:
        return self.state == EntryState.OPEN


class Scoreboard:
    """Mapping from category to recorded score, filled via ``choose_category``."""

    def __init__(self) -> None:
        self._scores: dict[Category, int] = {}

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, category: Category) -> bool:
        return category in self._scores

    def entry(self, category: Category) -> ScoreEntry:
        """Return the recorded state of a category."""
        score = self._scores.get(category)
        if score is None:
            return ScoreEntry(category=category, state=EntryState.OPEN)
        if category == Category.FIVE_OF_A_KIND and score > 0:
            return ScoreEntry(category=category, state=EntryState.JOKER, score=score)
        return ScoreEntry(category=category, state=EntryState.FILLED, score=score)

    def entries(self) -> tuple[ScoreEntry, ...]:
        """Recorded state of every category in scorecard order."""
        return tuple(self.entry(category) for category in CATEGORIES)

    def category_score(self, category: Category) -> int | None:
        """Recorded score for a category, or None if it is still open."""
        return self._scores.get(category)

    def category_is_available(self, category: Category, dice_set: DiceSet) -> bool:
        """
        Whether ``category`` may be chosen with the current dice.

        Open categories are always available. A filled category is not,
        except a Five of a Kind entry holding a positive score while the
        current dice are themselves a five of a kind.
        """
        state = self.entry(category).state
        if state == EntryState.OPEN:
            return True
        if state == EntryState.JOKER:
            return dice_set.score(category) > 0
        return False

    def available_categories(self, dice_set: DiceSet) -> tuple[Category, ...]:
        """Every category currently available, in scorecard order."""
        return tuple(
            category for category in CATEGORIES
            if self.category_is_available(category, dice_set)
        )

    def choose_category(self, category: Category, dice_set: DiceSet) -> int:
        """
        Record the dice's score for a category.

        An open category takes the score even when it is 0. A joker
        Five of a Kind entry adds the score to the existing total.

        Args:
            category: Category to fill
            dice_set: Dice being scored

        Returns:
            Points added by this choice

        Raises:
            CategoryUnavailableError: If the category is already filled
                and not eligible for the joker bonus
        """
        score = validate_score(dice_set.score(category))
        state = self.entry(category).state

        if state == EntryState.OPEN:
            self._scores[category] = score
            logger.debug("Recorded %d in %s", score, category.name)
        elif state == EntryState.JOKER:
            self._scores[category] += score
            logger.info(
                "Joker bonus: +%d in %s (now %d)",
                score, category.name, self._scores[category],
            )
        else:
            raise CategoryUnavailableError(
                f"Category {category.name} is already filled "
                f"with {self._scores[category]}."
            )

        return score

    def upper_subtotal(self) -> int:
        """Sum of the recorded upper-section entries."""
        return sum(self._scores.get(category, 0) for category in UPPER_SECTION)

    def upper_section_bonus(self) -> int:
        return UPPER_BONUS if self.upper_subtotal() > UPPER_BONUS_THRESHOLD else 0

    def upper_total(self) -> int:
        return self.upper_subtotal() + self.upper_section_bonus()

    def lower_total(self) -> int:
        return sum(self._scores.get(category, 0) for category in LOWER_SECTION)

    def grand_total(self) -> int:
        return self.upper_total() + self.lower_total()

    def game_is_finished(self) -> bool:
        """True once every category holds an entry."""
        return all(category in self._scores for category in CATEGORIES)
