"""Single-die modelling for tabletop dice-rolling tools."""

from polydie.dice import Die, DieKind

__all__ = ["Die", "DieKind"]
