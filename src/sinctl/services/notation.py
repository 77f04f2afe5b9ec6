"""NotationService — SIN token operations behind the ServiceResult contract.

Six read-only surfaces, all pure:
- parse: decompose one token into style and side
- validate: check a batch of tokens
- flip: swap the side of a token
- convert: replace the style and/or side of a token
- compare: field-wise comparison of two tokens
- list_styles: the closed style/side sets
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import structlog

from sinctl.domain.constants import Side, Style, max_string_length, valid_sides, valid_styles
from sinctl.domain.errors import InvalidSideError, InvalidStyleError, ParseError
from sinctl.domain.identifier import Identifier
from sinctl.domain.parser import ParseFailure, parse, parse_strict
from sinctl.services.result import ServiceError, ServiceResult

# Bound to a stdlib logger so library callers stay silent until
# configure_logging() installs a handler.
log = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


def describe(identifier: Identifier) -> dict[str, Any]:
    """Serialize an identifier for ``ServiceResult.data``."""
    return {
        "token": identifier.to_string(),
        "style": identifier.style.value,
        "side": identifier.side.value,
    }


def printable(token: object) -> str:
    """Return a JSON-safe spelling of a user-supplied token.

    Lone surrogates (undecodable command-line bytes) become
    backslash escapes; non-string values become their repr.
    """
    if isinstance(token, str):
        return token.encode("utf-8", "backslashreplace").decode("utf-8")
    return repr(token)


def coerce_style(value: str) -> Style:
    """Convert a style spelling (``"S"``) to a :class:`Style`.

    Raises:
        InvalidStyleError: If *value* is not an uppercase A-Z letter.
    """
    try:
        return Style(value)
    except ValueError as exc:
        raise InvalidStyleError(value) from exc


def coerce_side(value: str) -> Side:
    """Convert ``"first"``/``"second"`` to a :class:`Side`."""
    try:
        return Side(value)
    except ValueError as exc:
        raise InvalidSideError(value) from exc


class NotationService:
    """Parses, validates and transforms SIN tokens.

    Args:
        fail_fast: Stop ``validate`` at the first invalid token.
    """

    def __init__(self, *, fail_fast: bool = False) -> None:
        self._fail_fast = fail_fast

    @property
    def fail_fast(self) -> bool:
        return self._fail_fast

    # ------------------------------------------------------------------
    # parse
    # ------------------------------------------------------------------

    def parse(self, token: str) -> ServiceResult:
        try:
            identifier = parse_strict(token)
        except ParseError as exc:
            log.debug("token_rejected", op="parse", token=printable(token), kind=exc.kind.value)
            return ServiceResult.failure("parse", exc)

        log.debug(
            "token_parsed",
            op="parse",
            token=identifier.to_string(),
            style=identifier.style.value,
            side=identifier.side.value,
        )
        return ServiceResult(ok=True, op="parse", data=describe(identifier))

    # ------------------------------------------------------------------
    # validate — batch check
    # ------------------------------------------------------------------

    def validate(self, tokens: Sequence[str]) -> ServiceResult:
        """Check every token, reporting the failure kind of each invalid one.

        The result is ok only when every checked token is valid.
        """
        items: list[dict[str, Any]] = []
        invalid = 0
        stopped_early = False

        for index, token in enumerate(tokens):
            result = parse(token)
            shown = printable(token)
            if isinstance(result, ParseFailure):
                invalid += 1
                items.append({"token": shown, "valid": False, "kind": result.kind.value})
                if self._fail_fast and index < len(tokens) - 1:
                    stopped_early = True
                    break
            else:
                items.append({"token": shown, "valid": True, "kind": None})

        data = {
            "items": items,
            "count": len(items),
            "valid_count": len(items) - invalid,
            "invalid_count": invalid,
            "stopped_early": stopped_early,
        }
        log.debug(
            "tokens_validated",
            op="validate",
            count=len(items),
            invalid=invalid,
            stopped_early=stopped_early,
        )

        if invalid:
            return ServiceResult(
                ok=False,
                op="validate",
                data=data,
                error=ServiceError(
                    code="INVALID_TOKENS",
                    message=f"{invalid} of {len(items)} tokens are invalid",
                ),
            )
        return ServiceResult(ok=True, op="validate", data=data)

    # ------------------------------------------------------------------
    # flip / convert — transformations
    # ------------------------------------------------------------------

    def flip(self, token: str) -> ServiceResult:
        try:
            source = parse_strict(token)
        except ParseError as exc:
            return ServiceResult.failure("flip", exc)

        flipped = source.flip()
        return ServiceResult(
            ok=True,
            op="flip",
            data={**describe(flipped), "source": source.to_string()},
        )

    def convert(
        self,
        token: str,
        *,
        style: str | None = None,
        side: str | None = None,
    ) -> ServiceResult:
        """Replace the style and/or side of *token*.

        Style is applied before side, so an invalid style is reported even
        when the side is also invalid.
        """
        try:
            source = parse_strict(token)
            converted = source
            if style is not None:
                converted = converted.with_style(coerce_style(style))
            if side is not None:
                converted = converted.with_side(coerce_side(side))
        except (ParseError, InvalidStyleError, InvalidSideError) as exc:
            log.debug("convert_failed", op="convert", token=printable(token), code=exc.code)
            return ServiceResult.failure("convert", exc)

        warnings: list[str] = []
        if converted == source:
            warnings.append(f"Token {token!r} is unchanged")
        return ServiceResult(
            ok=True,
            op="convert",
            data={**describe(converted), "source": source.to_string()},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # compare
    # ------------------------------------------------------------------

    def compare(self, left: str, right: str) -> ServiceResult:
        try:
            a = parse_strict(left)
            b = parse_strict(right)
        except ParseError as exc:
            return ServiceResult.failure("compare", exc)

        return ServiceResult(
            ok=True,
            op="compare",
            data={
                "left": a.to_string(),
                "right": b.to_string(),
                "same_style": a.same_style(b),
                "same_side": a.same_side(b),
                "equal": a == b,
            },
        )

    # ------------------------------------------------------------------
    # list_styles
    # ------------------------------------------------------------------

    def list_styles(self) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="list_styles",
            data={
                "styles": [s.value for s in valid_styles()],
                "sides": [s.value for s in valid_sides()],
                "max_length": max_string_length(),
            },
        )
