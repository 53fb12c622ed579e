"""The Die entity.

A die holds its kind, bounds, rolled value and state flags. State is
mutated through a small fluent API; rolling draws from an injected sampler.

Usage:
    >>> from polydie.dice import Die, DieKind, seeded_sampler
    >>> d20 = Die.new(DieKind.D20)
    >>> 1 <= d20.roll(seeded_sampler(1)).value <= 20
    True
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from polydie.config import get_settings
from polydie.dice.exceptions import (
    DieRecordError,
    InvalidConfigurationError,
    InvalidRangeError,
)
from polydie.dice.sampler import Sampler, get_sampler
from polydie.dice.types import INT16_MAX, INT16_MIN, DieKind

logger = logging.getLogger(__name__)

Int16 = Annotated[int, Field(ge=INT16_MIN, le=INT16_MAX)]


def new_die_id() -> str:
    """Generate a globally unique die identifier."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def _range_error(name: str, value: object, error: ValidationError) -> InvalidRangeError:
    return InvalidRangeError(
        f"{name} must be between {INT16_MIN} and {INT16_MAX}, got {value}: {error}"
    )


class Die(BaseModel):
    """One die tracked through its roll lifecycle.

    Assignments are validated. ``id``, ``kind`` and ``timestamp`` are
    frozen and raise ``ValidationError`` when reassigned.

    Attributes:
        id: Unique identifier, fixed at creation.
        child: Id of the die produced by an explode or reroll event.
            The child itself is owned by the caller.
        kind: The type of die. Serialized as ``die``.
        is_dropped: Excluded from the final total.
        is_exploded: An explode event was recorded.
        is_rerolled: A reroll event was recorded.
        is_successful: Met a success condition. Every roll sets this.
        max: Highest value for range sampling.
        min: Lowest value for range sampling.
        sides: Explicit face values. Overrides min/max when present.
        timestamp: Creation time (UTC).
        value: Rolled outcome, 0 until the first roll.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=lambda: new_die_id(), frozen=True)
    child: str | None = None
    kind: DieKind = Field(alias="die", frozen=True)
    is_dropped: bool = False
    is_exploded: bool = False
    is_rerolled: bool = False
    is_successful: bool = False
    max: Int16 = 0
    min: Int16 = 0
    sides: list[Int16] | None = None
    timestamp: datetime = Field(default_factory=lambda: utc_now(), frozen=True)
    value: Int16 = 0

    @model_validator(mode="before")
    @classmethod
    def _default_bounds(cls, data: Any) -> Any:
        """Fill missing min/max from the kind's bounds table."""
        if not isinstance(data, dict):
            return data
        raw_kind = data.get("die", data.get("kind"))
        try:
            kind = DieKind(raw_kind)
        except ValueError:
            # Left for field validation to report
            return data
        data = dict(data)
        data.setdefault("min", kind.min_value)
        data.setdefault("max", kind.max_value)
        return data

    @field_validator("timestamp")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        """Store timestamps in UTC. Naive values are taken to be UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @classmethod
    def new(cls, kind: DieKind) -> "Die":
        """Create an unrolled die of the given kind."""
        return cls(kind=kind)

    # =========================================================================
    # State transitions
    # =========================================================================

    def drop(self) -> "Die":
        """Drop the die from the final total."""
        self.is_dropped = True
        return self

    def success(self) -> "Die":
        """Mark the die as meeting a success condition."""
        self.is_successful = True
        return self

    def exploded(self, child: "Die") -> "Die":
        """Mark the die as exploded and link to the die it spawned."""
        self.is_exploded = True
        self.child = child.id
        logger.debug(f"Die {self.id} exploded into {child.id}")
        return self

    def rerolled(self, child: "Die") -> "Die":
        """Mark the die as rerolled and link to its replacement."""
        self.is_rerolled = True
        self.child = child.id
        logger.debug(f"Die {self.id} rerolled as {child.id}")
        return self

    def set_min(self, value: int) -> "Die":
        """Overwrite the lower bound. Not checked against max or kind."""
        try:
            self.min = value
        except ValidationError as e:
            raise _range_error("min", value, e) from e
        return self

    def set_max(self, value: int) -> "Die":
        """Overwrite the upper bound. Not checked against min or kind."""
        try:
            self.max = value
        except ValidationError as e:
            raise _range_error("max", value, e) from e
        return self

    def set_sides(self, sides: list[int] | None) -> "Die":
        """Set explicit face values, or clear them with None.

        An empty list is accepted here but cannot be rolled.
        """
        if sides is not None:
            sides = list(sides)
        try:
            self.sides = sides
        except ValidationError as e:
            raise _range_error("sides", sides, e) from e
        return self

    # =========================================================================
    # Rolling
    # =========================================================================

    def roll(self, sampler: Sampler | None = None) -> "Die":
        """Roll the die, overwriting value and marking it successful.

        With sides set, one face is picked uniformly. Otherwise a uniform
        integer in the closed range [min, max] is drawn.

        The die performs no target comparison: every roll sets
        ``is_successful``. Callers with comparison mechanics must apply
        their own check afterwards.

        Args:
            sampler: Source of randomness. Defaults to the calling
                thread's sampler.

        Returns:
            This die, for chaining.

        Raises:
            InvalidConfigurationError: If sides is an empty list.
            InvalidRangeError: If min > max and inverted ranges are not
                being normalized.
        """
        if sampler is None:
            sampler = get_sampler()

        if self.sides is not None:
            if not self.sides:
                raise InvalidConfigurationError(
                    f"Die {self.id} has an empty sides list"
                )
            self.value = sampler.choice(self.sides)
        else:
            low, high = self._sampling_range()
            self.value = sampler.randint(low, high)

        self.is_successful = True
        logger.debug(f"Rolled {self.kind.value} {self.id}: {self.value}")
        return self

    def _sampling_range(self) -> tuple[int, int]:
        if self.min <= self.max:
            return self.min, self.max

        if not get_settings().normalize_inverted_range:
            raise InvalidRangeError(
                f"Die {self.id} has min {self.min} greater than max {self.max}",
                min_value=self.min,
                max_value=self.max,
            )

        logger.warning(
            f"Die {self.id} has inverted range ({self.min}, {self.max}), "
            f"rolling between {self.max} and {self.min}"
        )
        return self.max, self.min

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible record."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Serialize to a JSON string."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Die":
        """Load a die from a serialized record.

        Raises:
            DieRecordError: If the record is malformed.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DieRecordError(f"Invalid die record: {e}", raw_record=data) from e

    @classmethod
    def from_json(cls, text: str | bytes) -> "Die":
        """Load a die from a JSON string.

        Raises:
            DieRecordError: If the JSON is malformed or not a valid record.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise DieRecordError(f"Invalid die record: {e}", raw_record=text) from e
