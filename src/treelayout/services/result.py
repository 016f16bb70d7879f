"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any future interface consume this type.

Coordinates may be NaN or infinite, so JSON output writes them as the
``NaN``/``Infinity`` constants the snapshot format also uses, never as
``null``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes returned by LayoutService.
NOT_FOUND = "NOT_FOUND"
INVALID_SNAPSHOT = "INVALID_SNAPSHOT"
INCONSISTENT_BOUNDS = "INCONSISTENT_BOUNDS"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"check"``, ``"bounds"``, ``"show"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Build an ``ok=False`` result carrying a single :class:`ServiceError`."""
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail),
        )
