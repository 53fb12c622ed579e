"""Dice system.

Provides the Die entity, its kinds, and the samplers it rolls with.

Usage:
    >>> from polydie.dice import Die, DieKind
    >>> die = Die.new(DieKind.D6).roll()
    >>> child = Die.new(DieKind.D6).roll()
    >>> die.exploded(child).child == child.id
    True
"""

# Types
from polydie.dice.types import DIE_BOUNDS, DieKind

# Errors
from polydie.dice.exceptions import (
    DiceError,
    DieRecordError,
    InvalidConfigurationError,
    InvalidRangeError,
)

# Sampling
from polydie.dice.sampler import Sampler, get_sampler, reset_sampler, seeded_sampler

# Die
from polydie.dice.die import Die

__all__ = [
    # Types
    "DIE_BOUNDS",
    "DieKind",
    # Errors
    "DiceError",
    "DieRecordError",
    "InvalidConfigurationError",
    "InvalidRangeError",
    # Sampling
    "Sampler",
    "get_sampler",
    "reset_sampler",
    "seeded_sampler",
    # Die
    "Die",
]
