"""
Yacht - Scoring Engine

Scores a five-die roll against any of the 13 categories. Scoring is a pure
function of the dice: it never consults or mutates a scoreboard.

Faces are 0-indexed (pip count minus one); point values use pips.

All methods are stateless class methods operating on immutable data.
"""

from collections import Counter
from typing import Sequence

from yacht.engine.base import (
    FIVE_OF_A_KIND_SCORE,
    FULL_HOUSE_SCORE,
    LARGE_STRAIGHT_SCORE,
    NUM_FACES,
    SMALL_STRAIGHT_SCORE,
    Category,
    upper_face,
)


class ScoringEngine:
    """
    Stateless scoring rules for the five-dice game.

    Each guard used by ``score`` is exposed as its own predicate so it can
    be tested independently.
    """

    @classmethod
    def face_counts(cls, faces: Sequence[int]) -> Counter:
        """Count occurrences of each face value."""
        return Counter(faces)

    @classmethod
    def pip_sum(cls, faces: Sequence[int]) -> int:
        """Sum of the pip values of all dice."""
        return sum(face + 1 for face in faces)

    @classmethod
    def has_n_of_a_kind(cls, faces: Sequence[int], n: int) -> bool:
        """True if at least ``n`` dice share a face."""
        counts = cls.face_counts(faces)
        return any(count >= n for count in counts.values())

    @classmethod
    def is_full_house(cls, faces: Sequence[int]) -> bool:
        """
        True if one face appears exactly three times and another exactly twice.

        Five of a kind has no face with a count of exactly two, so it is
        not a full house.
        """
        counts = cls.face_counts(faces).values()
        return 3 in counts and 2 in counts

    @classmethod
    def is_straight_of_length(cls, faces: Sequence[int], n: int) -> bool:
        """True if ``n`` consecutive faces are all present (duplicates ignored)."""
        present = set(faces)
        for start in range(NUM_FACES - n + 1):
            if all(face in present for face in range(start, start + n)):
                return True
        return False

    @classmethod
    def is_five_of_a_kind(cls, faces: Sequence[int]) -> bool:
        """True if every die shows the same face."""
        return len(faces) > 0 and len(set(faces)) == 1

    @classmethod
    def score(cls, faces: Sequence[int], category: Category) -> int:
        """
        Points the given dice would earn in a category.

        Args:
            faces: 0-indexed die faces
            category: Category to score against

        Returns:
            Non-negative score; 0 when the roll does not qualify
        """
        if category in (
            Category.ONES, Category.TWOS, Category.THREES,
            Category.FOURS, Category.FIVES, Category.SIXES,
        ):
            face = upper_face(category)
            return cls.face_counts(faces)[face] * (face + 1)

        if category == Category.THREE_OF_A_KIND:
            return cls.pip_sum(faces) if cls.has_n_of_a_kind(faces, 3) else 0

        if category == Category.FOUR_OF_A_KIND:
            return cls.pip_sum(faces) if cls.has_n_of_a_kind(faces, 4) else 0

        if category == Category.FULL_HOUSE:
            return FULL_HOUSE_SCORE if cls.is_full_house(faces) else 0

        if category == Category.SMALL_STRAIGHT:
            return SMALL_STRAIGHT_SCORE if cls.is_straight_of_length(faces, 4) else 0

        if category == Category.LARGE_STRAIGHT:
            return LARGE_STRAIGHT_SCORE if cls.is_straight_of_length(faces, 5) else 0

        if category == Category.FIVE_OF_A_KIND:
            return FIVE_OF_A_KIND_SCORE if cls.is_five_of_a_kind(faces) else 0

        if category == Category.CHANCE:
            return cls.pip_sum(faces)

        raise ValueError(f"Unknown category: {category!r}")

    @classmethod
    def score_all(cls, faces: Sequence[int]) -> dict[Category, int]:
        """Score the dice against every category."""
        return {category: cls.score(faces, category) for category in Category}
