"""
Yacht - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
Die faces are 0-indexed throughout the engine (pip count minus one).
"""

from typing import Sequence

from yacht.engine.base import NUM_DICE, NUM_FACES


def validate_face(face: int) -> int:
    """
    Validate a single 0-indexed die face.

    Args:
        face: Face value to validate (0-5)

    Returns:
        The validated face

    Raises:
        ValueError: If the face is not an integer in range
    """
    if not isinstance(face, int) or isinstance(face, bool):
        raise ValueError(f"Die face must be an integer, got {type(face).__name__}.")
    if not (0 <= face < NUM_FACES):
        raise ValueError(
            f"Invalid die face {face}. Must be between 0 and {NUM_FACES - 1}."
        )
    return face


def validate_pips(pips: int) -> int:
    """
    Validate a pip count (1-6) and convert it to a 0-indexed face.

    Raises:
        ValueError: If the pip count is out of range
    """
    if not isinstance(pips, int) or isinstance(pips, bool):
        raise ValueError(f"Pip count must be an integer, got {type(pips).__name__}.")
    if not (1 <= pips <= NUM_FACES):
        raise ValueError(f"Invalid pip count {pips}. Must be between 1 and {NUM_FACES}.")
    return pips - 1


def validate_faces(faces: Sequence[int]) -> tuple[int, ...]:
    """
    Validate a full set of dice faces.

    Args:
        faces: Sequence of 0-indexed faces, one per die slot

    Returns:
        Validated faces as a tuple

    Raises:
        ValueError: If the count is not NUM_DICE or any face is invalid
    """
    faces_tuple = tuple(faces)
    if len(faces_tuple) != NUM_DICE:
        raise ValueError(f"Exactly {NUM_DICE} dice required, got {len(faces_tuple)}.")

    for i, face in enumerate(faces_tuple):
        try:
            validate_face(face)
        except ValueError as exc:
            raise ValueError(f"Die at slot {i}: {exc}") from exc

    return faces_tuple


def validate_slot(slot: int) -> int:
    """
    Validate a 0-indexed die slot.

    Raises:
        ValueError: If the slot is out of range
    """
    if not isinstance(slot, int) or isinstance(slot, bool):
        raise ValueError(f"Die slot must be an integer, got {type(slot).__name__}.")
    if not (0 <= slot < NUM_DICE):
        raise ValueError(
            f"Die slot {slot} is out of range. Must be between 0 and {NUM_DICE - 1}."
        )
    return slot


def validate_hold_flags(flags: Sequence[bool]) -> tuple[bool, ...]:
    """
    Validate a per-slot hold-for-reroll mask.

    Raises:
        ValueError: If the mask does not have exactly one flag per die
    """
    flags_tuple = tuple(bool(flag) for flag in flags)
    if len(flags_tuple) != NUM_DICE:
        raise ValueError(f"Expected {NUM_DICE} hold flags, got {len(flags_tuple)}.")
    return flags_tuple


def validate_score(score: int) -> int:
    """
    Validate a recorded score value.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score
