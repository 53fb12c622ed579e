"""Die type definitions.

The fixed set of die kinds and the bounds each one rolls between.
"""

from enum import Enum

# Serialized dice use 16-bit signed integers for bounds, faces and values
INT16_MIN = -32768
INT16_MAX = 32767


class DieKind(str, Enum):
    """Kind of die being rolled.

    Values equal the variant names, which is also the serialized form:
    - D4 through D100: standard polyhedral dice, 1..N
    - Fate: FUDGE die with faces -1, 0, +1
    - Other: homebrew die, bounds (0, 0) until the caller sets them
    """

    D4 = "D4"
    D6 = "D6"
    D8 = "D8"
    D10 = "D10"
    D12 = "D12"
    D20 = "D20"
    D100 = "D100"
    FATE = "Fate"
    OTHER = "Other"

    @property
    def bounds(self) -> tuple[int, int]:
        """Default (min, max) for this kind."""
        return DIE_BOUNDS[self]

    @property
    def min_value(self) -> int:
        """Lowest face of this kind."""
        return DIE_BOUNDS[self][0]

    @property
    def max_value(self) -> int:
        """Highest face of this kind."""
        return DIE_BOUNDS[self][1]


DIE_BOUNDS: dict[DieKind, tuple[int, int]] = {
    DieKind.D4: (1, 4),
    DieKind.D6: (1, 6),
    DieKind.D8: (1, 8),
    DieKind.D10: (1, 10),
    DieKind.D12: (1, 12),
    DieKind.D20: (1, 20),
    DieKind.D100: (1, 100),
    DieKind.FATE: (-1, 1),
    DieKind.OTHER: (0, 0),
}
