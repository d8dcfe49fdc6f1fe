"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
Domain validation errors never escape the service layer as exceptions;
the CLI consumes this type and maps ``ok=False`` to a non-zero exit.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    Attributes:
        code: Machine-readable code (e.g. ``"BELOW_ABSOLUTE_ZERO"``).
        kind: Failure kind shown to humans (e.g. ``"BelowAbsoluteZero"``).
        message: One-line description naming the offending input.
        detail: The offending input, as structured data.
    """

    model_config = {"frozen": True}

    code: str
    kind: str = ""
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"convert"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (e.g. the Kelvin equivalent of the source).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
