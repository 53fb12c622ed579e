"""Tests for the dice exception hierarchy."""

import pytest

from polydie.dice.exceptions import (
    DiceError,
    DieRecordError,
    InvalidConfigurationError,
    InvalidRangeError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "error_class",
        [InvalidConfigurationError, InvalidRangeError, DieRecordError],
    )
    def test_errors_are_dice_errors(self, error_class):
        """All dice errors share a base and are ValueErrors."""
        assert issubclass(error_class, DiceError)
        assert issubclass(error_class, ValueError)

    def test_invalid_range_carries_bounds(self):
        """InvalidRangeError records the rejected bounds."""
        error = InvalidRangeError("inverted", min_value=5, max_value=1)
        assert str(error) == "inverted"
        assert error.min_value == 5
        assert error.max_value == 1

    def test_record_error_carries_raw_record(self):
        """DieRecordError keeps the record that failed."""
        error = DieRecordError("bad record", raw_record={"die": "D7"})
        assert error.raw_record == {"die": "D7"}
