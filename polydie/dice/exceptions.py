"""Dice exception definitions.

Custom exception hierarchy for die configuration and rolling.
"""


class DiceError(Exception):
    """Base exception for dice operations."""

    pass


class InvalidConfigurationError(DiceError, ValueError):
    """Die cannot be rolled as configured (e.g. an empty sides list)."""

    pass


class InvalidRangeError(DiceError, ValueError):
    """Bounds are inverted or outside the supported integer range.

    Attributes:
        min_value: Lower bound that was rejected.
        max_value: Upper bound that was rejected.
    """

    def __init__(
        self,
        message: str,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> None:
        super().__init__(message)
        self.min_value = min_value
        self.max_value = max_value


class DieRecordError(DiceError, ValueError):
    """Failed to load a serialized die record.

    Attributes:
        raw_record: The record that failed validation.
    """

    def __init__(self, message: str, raw_record: object | None = None) -> None:
        super().__init__(message)
        self.raw_record = raw_record
