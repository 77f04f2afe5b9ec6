"""Exception types raised by the domain layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sinctl.domain.parser import ParseErrorKind


class SinError(ValueError):
    """Base class for all SIN domain errors."""

    code = "SIN_ERROR"


class InvalidStyleError(SinError):
    """Raised when a style is not one of the 26 :class:`Style` members."""

    code = "INVALID_STYLE"

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid style: {value!r}")
        self.value = value


class InvalidSideError(SinError):
    """Raised when a side is not ``Side.FIRST`` or ``Side.SECOND``."""

    code = "INVALID_SIDE"

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid side: {value!r}")
        self.value = value


class ParseError(SinError):
    """Raised by ``parse_strict`` when the input is not a valid token.

    Attributes:
        kind: The classified failure (see :class:`ParseErrorKind`).
        value: The rejected input.
    """

    def __init__(self, kind: ParseErrorKind, value: Any = None) -> None:
        super().__init__(kind.message)
        self.kind = kind
        self.value = value

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.kind.name
