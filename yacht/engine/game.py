"""
Yacht - Game Session

The turn state machine for a single-player game. A session owns the current
dice, the roll count, the per-slot hold flags, the category cursor and the
scoreboard. Every mutator runs to completion before the next one starts and
reports whether it changed any state; requests that a player can make
through normal play but that have no effect (re-rolling with nothing held,
holding a die on the final roll) are silent no-ops.

Turn states:
- rolling: roll_count < MAX_ROLLS, dice may be held and re-rolled
- final roll: roll_count == MAX_ROLLS, only a category commit remains
- finished: every category filled, the cursor is None and nothing mutates
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from yacht.engine.base import CATEGORIES, MAX_ROLLS, NUM_DICE, Category
from yacht.engine.dice import DiceSet
from yacht.engine.scoreboard import Scoreboard
from yacht.engine.validators import validate_slot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryLine:
    """
    One scorecard row as seen by a renderer.

    Attributes:
        category: The category
        recorded: Score already recorded (None while open)
        potential: What the current dice would score here
        available: Whether the cursor may land on this category
        selected: Whether the cursor is on this category
    """
    category: Category
    recorded: int | None
    potential: int
    available: bool
    selected: bool

    @property
    def display_score(self) -> int:
        """Recorded score plus the live score when the category is available."""
        return (self.recorded or 0) + (self.potential if self.available else 0)


@dataclass(frozen=True)
class TurnSnapshot:
    """
    Read-only view of a session, handed to rendering code.

    Attributes:
        dice: Pip values in slot order
        held: Hold-for-reroll flag per slot
        roll_count: Current roll (1-3)
        selected: Category under the cursor (None once finished)
        lines: Scorecard rows in scorecard order
        upper_bonus: Upper section bonus
        upper_total: Upper subtotal plus bonus
        lower_total: Lower section total
        grand_total: Upper plus lower total
        is_finished: Whether every category is filled
    """
    dice: tuple[int, ...]
    held: tuple[bool, ...]
    roll_count: int
    selected: Category | None
    lines: tuple[CategoryLine, ...] = field(default_factory=tuple)
    upper_bonus: int = 0
    upper_total: int = 0
    lower_total: int = 0
    grand_total: int = 0
    is_finished: bool = False

    @property
    def can_reroll(self) -> bool:
        return not self.is_finished and self.roll_count < MAX_ROLLS and any(self.held)

    @property
    def roll_label(self) -> str:
        return f"Roll {self.roll_count} / {MAX_ROLLS}"

    @property
    def hints(self) -> tuple[str, ...]:
        """Context help lines for the controls that currently do something."""
        if self.is_finished:
            return ()
        lines = ["Enter:       choose a scoring category"]
        if self.roll_count < MAX_ROLLS:
            lines.append("Number keys: mark dice to be re-rolled")
            if any(self.held):
                lines.append("R:           roll marked dice")
        return tuple(lines)

    def line(self, category: Category) -> CategoryLine:
        return self.lines[CATEGORIES.index(category)]


class GameSession:
    """
    A single in-memory game.

    Args:
        rng: Random source for die draws (defaults to the ``random`` module)
        dice: Optional opening dice instead of a random draw
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        dice: DiceSet | None = None,
    ) -> None:
        self._rng = rng
        self._scoreboard = Scoreboard()
        self._dice = dice if dice is not None else DiceSet.roll(self._rng)
        self._roll_count = 1
        self._held = [False] * NUM_DICE
        self._cursor: int | None = 0
        self._select_next_available()
        logger.debug("New game: dice %s", self._dice)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def dice(self) -> DiceSet:
        return self._dice

    @property
    def held(self) -> tuple[bool, ...]:
        return tuple(self._held)

    @property
    def roll_count(self) -> int:
        return self._roll_count

    @property
    def scoreboard(self) -> Scoreboard:
        return self._scoreboard

    @property
    def selected_category(self) -> Category | None:
        if self._cursor is None:
            return None
        return CATEGORIES[self._cursor]

    @property
    def is_finished(self) -> bool:
        return self._scoreboard.game_is_finished()

    @property
    def is_final_roll(self) -> bool:
        return self._roll_count >= MAX_ROLLS

    def recorded_score(self, category: Category) -> int | None:
        return self._scoreboard.category_score(category)

    def potential_score(self, category: Category) -> int:
        """What the current dice would score in ``category``."""
        return self._dice.score(category)

    def is_available(self, category: Category) -> bool:
        return self._scoreboard.category_is_available(category, self._dice)

    def snapshot(self) -> TurnSnapshot:
        """Capture a read-only view of the whole session."""
        board = self._scoreboard
        selected = self.selected_category
        lines = tuple(
            CategoryLine(
                category=category,
                recorded=board.category_score(category),
                potential=self._dice.score(category),
                available=board.category_is_available(category, self._dice),
                selected=category == selected,
            )
            for category in CATEGORIES
        )
        return TurnSnapshot(
            dice=self._dice.pips,
            held=self.held,
            roll_count=self._roll_count,
            selected=selected,
            lines=lines,
            upper_bonus=board.upper_section_bonus(),
            upper_total=board.upper_total(),
            lower_total=board.lower_total(),
            grand_total=board.grand_total(),
            is_finished=self.is_finished,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def toggle_hold(self, slot: int) -> bool:
        """
        Flip the hold-for-reroll flag of a die slot (0-indexed).

        No-op on the final roll or once the game is finished.

        Raises:
            ValueError: If the slot is out of range
        """
        validate_slot(slot)
        if self._cursor is None or self.is_final_roll:
            logger.debug("Hold toggle ignored on slot %d", slot)
            return False

        self._held[slot] = not self._held[slot]
        return True

    def reroll(self) -> bool:
        """
        Re-roll exactly the held dice and advance the roll count.

        No-op when nothing is held, no re-roll remains or the game is over.
        """
        if self._cursor is None or self.is_final_roll or not any(self._held):
            logger.debug("Re-roll ignored (roll %d, held %s)", self._roll_count, self._held)
            return False

        self._dice = self._dice.reroll(self._held, self._rng)
        self._roll_count += 1
        self._held = [False] * NUM_DICE
        logger.debug("Roll %d: dice %s", self._roll_count, self._dice)

        # The new dice can close a joker Five of a Kind under the cursor
        self._select_next_available()
        return True

    def move_up(self) -> bool:
        if self._cursor is None:
            return False
        self._cursor = (self._cursor - 1) % len(CATEGORIES)
        self._select_prev_available()
        return True

    def move_down(self) -> bool:
        if self._cursor is None:
            return False
        self._cursor = (self._cursor + 1) % len(CATEGORIES)
        self._select_next_available()
        return True

    def move_home(self) -> bool:
        if self._cursor is None:
            return False
        self._cursor = 0
        self._select_next_available()
        return True

    def move_end(self) -> bool:
        if self._cursor is None:
            return False
        self._cursor = len(CATEGORIES) - 1
        self._select_prev_available()
        return True

    def commit(self) -> bool:
        """
        Score the current dice in the category under the cursor.

        Starts a new turn afterwards, or ends the game once every
        category is filled.

        Raises:
            CategoryUnavailableError: If the cursor somehow rests on an
                unavailable category
        """
        category = self.selected_category
        if category is None:
            logger.debug("Commit ignored: game is finished")
            return False

        points = self._scoreboard.choose_category(category, self._dice)
        self._held = [False] * NUM_DICE
        logger.info("Scored %d in %s", points, category.display_name)

        if self._scoreboard.game_is_finished():
            self._cursor = None
            logger.info("Game finished: %d points", self._scoreboard.grand_total())
        else:
            self._new_turn()
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_turn(self) -> None:
        self._dice = DiceSet.roll(self._rng)
        self._roll_count = 1
        self._held = [False] * NUM_DICE
        self._select_next_available()
        logger.debug("New turn: dice %s", self._dice)

    def _select_next_available(self) -> None:
        self._skip_unavailable(step=1)

    def _select_prev_available(self) -> None:
        self._skip_unavailable(step=-1)

    def _skip_unavailable(self, step: int) -> None:
        """Walk the cursor in ``step`` direction until it rests on an available category."""
        if self._cursor is None:
            return
        for _ in range(len(CATEGORIES)):
            if self.is_available(CATEGORIES[self._cursor]):
                return
            self._cursor = (self._cursor + step) % len(CATEGORIES)
        raise RuntimeError("No category is available for the current dice.")
