"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any future interface consume this type. Domain exceptions
never cross this boundary; they are folded into ``error`` instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from sinctl.domain.errors import InvalidSideError, InvalidStyleError, ParseError, SinError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: SinError) -> ServiceError:
        """Build an error payload from a domain exception."""
        detail: dict[str, Any] = {}
        if isinstance(exc, ParseError):
            detail = {"kind": exc.kind.value, "input": repr(exc.value)}
        elif isinstance(exc, (InvalidStyleError, InvalidSideError)):
            detail = {"input": repr(exc.value)}
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse"``, ``"flip"``).
        data: Operation-specific payload.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: SinError, **data: Any) -> ServiceResult:
        return cls(ok=False, op=op, data=data, error=ServiceError.from_exception(exc))
