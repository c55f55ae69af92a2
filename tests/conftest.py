"""
Yacht - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import itertools
from typing import Callable, Sequence

import pytest

from yacht.engine.dice import DiceSet
from yacht.engine.game import GameSession


class ScriptedRandom:
    """
    Random source that returns preset pip values, cycling forever.

    Only ``randrange`` is provided, which is all die draws use.
    """

    def __init__(self, pips: Sequence[int]) -> None:
        self._faces = itertools.cycle([p - 1 for p in pips])

    def randrange(self, stop: int) -> int:
        face = next(self._faces)
        assert 0 <= face < stop
        return face


# =============================================================================
# RANDOMNESS
# =============================================================================

@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory: ``scripted_rng(3, 3, 4)`` yields faces for pips 3, 3, 4, 3, 3, 4, ..."""
    def make(*pips: int) -> ScriptedRandom:
        return ScriptedRandom(pips)
    return make


# =============================================================================
# DICE TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[tuple[int, ...], dict[str, int]]]:
    """
    Common roll patterns with expected category scores.

    Returns:
        Dict mapping name to (pips, {category name: expected score})
    """
    return {
        "low_straight": ((1, 2, 3, 4, 5), {
            "SMALL_STRAIGHT": 30, "LARGE_STRAIGHT": 40, "CHANCE": 15, "FULL_HOUSE": 0,
        }),
        "high_straight": ((2, 3, 4, 5, 6), {
            "SMALL_STRAIGHT": 30, "LARGE_STRAIGHT": 40, "CHANCE": 20,
        }),
        "small_straight_with_pair": ((1, 1, 2, 3, 4), {
            "SMALL_STRAIGHT": 30, "LARGE_STRAIGHT": 0, "ONES": 2,
        }),
        "small_straight_shuffled": ((6, 4, 3, 1, 5), {
            "SMALL_STRAIGHT": 30, "LARGE_STRAIGHT": 0,
        }),
        "gap_no_straight": ((1, 2, 3, 5, 6), {
            "SMALL_STRAIGHT": 0, "LARGE_STRAIGHT": 0,
        }),
        "full_house": ((2, 2, 2, 5, 5), {
            "FULL_HOUSE": 25, "THREE_OF_A_KIND": 16, "FOUR_OF_A_KIND": 0,
            "TWOS": 6, "FIVES": 10,
        }),
        "four_of_a_kind": ((2, 2, 2, 2, 5), {
            "FULL_HOUSE": 0, "FOUR_OF_A_KIND": 13, "THREE_OF_A_KIND": 13,
            "FIVE_OF_A_KIND": 0,
        }),
        "two_pairs": ((3, 3, 4, 4, 6), {
            "THREE_OF_A_KIND": 0, "FULL_HOUSE": 0, "CHANCE": 20,
        }),
        "five_sixes": ((6, 6, 6, 6, 6), {
            "FIVE_OF_A_KIND": 50, "FOUR_OF_A_KIND": 30, "THREE_OF_A_KIND": 30,
            "FULL_HOUSE": 0, "SIXES": 30, "ONES": 0,
        }),
    }


@pytest.fixture
def plain_dice() -> DiceSet:
    """A roll that is not five of a kind: 1 2 3 4 6."""
    return DiceSet.from_pips(1, 2, 3, 4, 6)


@pytest.fixture
def yacht_dice() -> DiceSet:
    """Five threes."""
    return DiceSet.from_pips(3, 3, 3, 3, 3)


# =============================================================================
# GAME SESSION FIXTURES
# =============================================================================

@pytest.fixture
def plain_session(plain_dice, scripted_rng) -> GameSession:
    """Session whose every draw repeats 1 2 3 4 6, so no joker can occur."""
    return GameSession(rng=scripted_rng(1, 2, 3, 4, 6), dice=plain_dice)
