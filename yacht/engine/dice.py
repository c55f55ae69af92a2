"""
Yacht - Dice

Immutable representations of a single die and the five-die set. A die is
never mutated in place: re-rolling produces a new DiceSet with the held
slots replaced by fresh draws.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from yacht.engine.base import NUM_DICE, NUM_FACES, Category
from yacht.engine.scoring import ScoringEngine
from yacht.engine.validators import (
    validate_face,
    validate_faces,
    validate_hold_flags,
    validate_pips,
)


@dataclass(frozen=True)
class Die:
    """
    A single die.

    Attributes:
        face: 0-indexed face value (pip count minus one)
    """
    face: int

    def __post_init__(self) -> None:
        validate_face(self.face)

    @property
    def pips(self) -> int:
        """Pip count shown on the die (1-6)."""
        return self.face + 1

    @classmethod
    def roll(cls, rng: random.Random | None = None) -> "Die":
        """Draw a die uniformly over the six faces."""
        rng = rng or random
        return cls(face=rng.randrange(NUM_FACES))

    @classmethod
    def from_pips(cls, pips: int) -> "Die":
        return cls(face=validate_pips(pips))


@dataclass(frozen=True)
class DiceSet:
    """
    Ordered set of five dice.

    Order maps to the physical die slots used for hold selection and
    display; scoring ignores it.

    Attributes:
        dice: Tuple of exactly five Die
    """
    dice: tuple[Die, ...]

    def __post_init__(self) -> None:
        if len(self.dice) != NUM_DICE:
            raise ValueError(f"Exactly {NUM_DICE} dice required, got {len(self.dice)}.")
        for die in self.dice:
            if not isinstance(die, Die):
                raise ValueError(f"Expected Die, got {type(die).__name__}.")

    def __len__(self) -> int:
        return len(self.dice)

    def __getitem__(self, index: int) -> Die:
        return self.dice[index]

    def __iter__(self):
        return iter(self.dice)

    def __str__(self) -> str:
        return " ".join(str(pips) for pips in self.pips)

    @property
    def faces(self) -> tuple[int, ...]:
        """0-indexed face values in slot order."""
        return tuple(die.face for die in self.dice)

    @property
    def pips(self) -> tuple[int, ...]:
        """Pip values in slot order."""
        return tuple(die.pips for die in self.dice)

    @classmethod
    def from_faces(cls, faces: Sequence[int]) -> "DiceSet":
        """Create a DiceSet from 0-indexed faces."""
        return cls(dice=tuple(Die(face) for face in validate_faces(faces)))

    @classmethod
    def from_pips(cls, *pips: int) -> "DiceSet":
        """Create a DiceSet from pip values, e.g. ``DiceSet.from_pips(2, 2, 2, 5, 5)``."""
        return cls.from_faces([validate_pips(value) for value in pips])

    @classmethod
    def roll(cls, rng: random.Random | None = None) -> "DiceSet":
        """Draw five fresh dice."""
        return cls(dice=tuple(Die.roll(rng) for _ in range(NUM_DICE)))

    def reroll(
        self,
        held: Sequence[bool],
        rng: random.Random | None = None,
    ) -> "DiceSet":
        """
        Replace the dice marked for re-roll with fresh draws.

        Args:
            held: One flag per slot; True means the die is re-rolled
            rng: Optional random source

        Returns:
            New DiceSet; unmarked dice are carried over unchanged
        """
        flags = validate_hold_flags(held)
        return DiceSet(dice=tuple(
            Die.roll(rng) if flag else die
            for die, flag in zip(self.dice, flags)
        ))

    def score(self, category: Category) -> int:
        """Points these dice would earn in ``category``."""
        return ScoringEngine.score(self.faces, category)
