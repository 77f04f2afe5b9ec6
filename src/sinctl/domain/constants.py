"""Closed value sets for SIN tokens.

A token is a single ASCII letter: the letter's base identity is the
style (A-Z), its case is the side (uppercase = first, lowercase = second).

INVARIANT: Styles are always stored in canonical uppercase form.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class Style(StrEnum):
    """The 26 style categories, spelled A through Z."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"


class Side(StrEnum):
    """Which player a token belongs to."""

    FIRST = "first"
    SECOND = "second"

    def opposite(self) -> Side:
        return Side.SECOND if self is Side.FIRST else Side.FIRST


VALID_STYLES: tuple[Style, ...] = tuple(Style)
VALID_SIDES: tuple[Side, ...] = (Side.FIRST, Side.SECOND)
MAX_STRING_LENGTH = 1


def valid_styles() -> tuple[Style, ...]:
    """Return all styles in alphabetical order."""
    return VALID_STYLES


def valid_sides() -> tuple[Side, ...]:
    """Return ``(Side.FIRST, Side.SECOND)``."""
    return VALID_SIDES


def max_string_length() -> int:
    """Return the maximum byte length of a token."""
    return MAX_STRING_LENGTH


def is_valid_style(value: Any) -> bool:
    """Check whether *value* is a :class:`Style` member.

    Plain strings are rejected even when they spell a style (``"C"``);
    callers convert with ``Style("C")`` first.
    """
    return isinstance(value, Style)


def is_valid_side(value: Any) -> bool:
    """Check whether *value* is a :class:`Side` member."""
    return isinstance(value, Side)
