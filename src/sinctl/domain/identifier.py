"""Identifier — the immutable (style, side) value behind a SIN token.

INVARIANT: Both fields are always valid. Construction fails rather than
producing a partially-valid value, and every transformation returns a
new Identifier.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self

from sinctl.domain.constants import Side, Style, is_valid_side, is_valid_style
from sinctl.domain.errors import InvalidSideError, InvalidStyleError


@dataclass(frozen=True, slots=True, repr=False)
class Identifier:
    """A validated style paired with a side.

    Usage::

        sin = Identifier(Style.C, Side.FIRST)
        str(sin)                       # "C"
        str(sin.with_side(Side.SECOND))  # "c"
    """

    style: Style
    side: Side

    def __post_init__(self) -> None:
        # Style is checked first: a caller passing two bad values sees the style error.
        if not is_valid_style(self.style):
            raise InvalidStyleError(self.style)
        if not is_valid_side(self.side):
            raise InvalidSideError(self.side)

    @classmethod
    def new(cls, style: Style, side: Side) -> Self:
        return cls(style, side)

    # --- Rendering ---

    def to_string(self) -> str:
        """Render the canonical token: uppercase for first, lowercase for second."""
        if self.side is Side.FIRST:
            return self.style.value
        return self.style.value.lower()

    def letter(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Identifier<{self.to_string()}>"

    # --- Transformations ---

    def flip(self) -> Self:
        """Return a copy with the opposite side."""
        return replace(self, side=self.side.opposite())

    def with_style(self, style: Style) -> Self:
        if style == self.style and is_valid_style(style):
            return self
        return replace(self, style=style)

    def with_side(self, side: Side) -> Self:
        if side == self.side and is_valid_side(side):
            return self
        return replace(self, side=side)

    # --- Queries ---

    def is_first_player(self) -> bool:
        return self.side is Side.FIRST

    def is_second_player(self) -> bool:
        return self.side is Side.SECOND

    def same_style(self, other: Identifier) -> bool:
        return self.style is other.style

    def same_side(self, other: Identifier) -> bool:
        return self.side is other.side
