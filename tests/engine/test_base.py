"""
Yacht - Base Definitions Tests

Tests for the category catalog, constants, and validation utilities.
"""

import pytest
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
    upper_face,
)
from yacht.engine.validators import (
    validate_face,
    validate_faces,
    validate_hold_flags,
    validate_pips,
    validate_score,
    validate_slot,
)


class TestConstants:
    """Tests for fixed rule constants."""

    def test_dice_shape(self):
        assert NUM_DICE == 5
        assert NUM_FACES == 6

    def test_max_rolls(self):
        assert MAX_ROLLS == 3


class TestCategoryCatalog:
    """Tests for the category enumeration and sections."""

    def test_thirteen_categories(self):
        assert len(CATEGORIES) == 13
        assert len(set(CATEGORIES)) == 13

    def test_section_sizes(self):
        assert len(UPPER_SECTION) == 6
        assert len(LOWER_SECTION) == 7

    def test_sections_partition_catalog(self):
        assert set(UPPER_SECTION) | set(LOWER_SECTION) == set(CATEGORIES)
        assert not set(UPPER_SECTION) & set(LOWER_SECTION)

    def test_catalog_order(self):
        assert CATEGORIES == UPPER_SECTION + LOWER_SECTION
        assert CATEGORIES[0] == Category.ONES
        assert CATEGORIES[-1] == Category.CHANCE
        assert CATEGORIES[11] == Category.FIVE_OF_A_KIND

    def test_index_matches_order(self):
        for i, category in enumerate(CATEGORIES):
            assert category.index == i

    @pytest.mark.parametrize("category", UPPER_SECTION)
    def test_upper_membership(self, category):
        assert category.is_upper is True

    @pytest.mark.parametrize("category", LOWER_SECTION)
    def test_lower_membership(self, category):
        assert category.is_upper is False

    def test_equality_by_variant(self):
        assert Category.CHANCE == Category["CHANCE"]
        assert hash(Category.CHANCE) == hash(Category["CHANCE"])


class TestDisplayNames:
    """Tests for scorecard labels."""

    @pytest.mark.parametrize("category,label", [
        (Category.ONES, "⚀ 1s"),
        (Category.SIXES, "⚅ 6s"),
        (Category.THREE_OF_A_KIND, "3 of a Kind"),
        (Category.FULL_HOUSE, "Full House"),
        (Category.SMALL_STRAIGHT, "Small Straight"),
        (Category.FIVE_OF_A_KIND, "5 of a Kind"),
        (Category.CHANCE, "Chance"),
    ])
    def test_labels(self, category, label):
        assert display_name(category) == label
        assert category.display_name == label
        assert str(category) == label

    def test_every_category_has_label(self):
        labels = [display_name(c) for c in CATEGORIES]
        assert all(labels)
        assert len(set(labels)) == 13


class TestUpperFace:
    """Tests for upper_face()."""

    @pytest.mark.parametrize("category,face", list(zip(UPPER_SECTION, range(6))))
    def test_upper_faces(self, category, face):
        assert upper_face(category) == face

    def test_lower_category_raises(self):
        with pytest.raises(ValueError, match="not an upper-section"):
            upper_face(Category.CHANCE)


class TestEntryStateAndErrors:
    """Tests for entry states and the contract error."""

    def test_entry_states(self):
        assert {s.name for s in EntryState} == {"OPEN", "FILLED", "JOKER"}

    def test_unavailable_error_is_value_error(self):
        assert issubclass(CategoryUnavailableError, ValueError)


class TestValidateFace:
    """Tests for validate_face() and validate_pips()."""

    @pytest.mark.parametrize("face", range(6))
    def test_valid_faces(self, face):
        assert validate_face(face) == face

    @pytest.mark.parametrize("face", [-1, 6, 10])
    def test_out_of_range(self, face):
        with pytest.raises(ValueError, match="Invalid die face"):
            validate_face(face)

    def test_non_integer(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_face(2.0)

    def test_bool_rejected(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_face(True)

    @pytest.mark.parametrize("pips,face", [(1, 0), (6, 5)])
    def test_pips_to_face(self, pips, face):
        assert validate_pips(pips) == face

    @pytest.mark.parametrize("pips", [0, 7])
    def test_invalid_pips(self, pips):
        with pytest.raises(ValueError, match="Invalid pip count"):
            validate_pips(pips)


class TestValidateFaces:
    """Tests for validate_faces()."""

    def test_valid(self):
        assert validate_faces([0, 1, 2, 3, 4]) == (0, 1, 2, 3, 4)

    @pytest.mark.parametrize("faces", [[], [0, 1, 2, 3], [0, 1, 2, 3, 4, 5]])
    def test_wrong_count(self, faces):
        with pytest.raises(ValueError, match="Exactly 5 dice required"):
            validate_faces(faces)

    def test_reports_slot(self):
        with pytest.raises(ValueError, match="slot 3"):
            validate_faces([0, 1, 2, 9, 4])


class TestValidateSlotAndFlags:
    """Tests for validate_slot() and validate_hold_flags()."""

    @pytest.mark.parametrize("slot", range(5))
    def test_valid_slots(self, slot):
        assert validate_slot(slot) == slot

    @pytest.mark.parametrize("slot", [-1, 5])
    def test_invalid_slots(self, slot):
        with pytest.raises(ValueError, match="out of range"):
            validate_slot(slot)

    def test_flags_normalized(self):
        assert validate_hold_flags([1, 0, 0, 0, 1]) == (True, False, False, False, True)

    def test_flags_wrong_count(self):
        with pytest.raises(ValueError, match="Expected 5 hold flags"):
            validate_hold_flags([True, False])


class TestValidateScore:
    """Tests for validate_score()."""

    def test_zero_allowed(self):
        assert validate_score(0) == 0

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            validate_score(-1)

    def test_non_integer(self):
        with pytest.raises(ValueError, match="must be an integer"):
            validate_score("10")
