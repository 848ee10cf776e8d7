"""ServiceResult and ServiceError — what a calculation run hands the CLI.

Services never raise cubicweight errors to the CLI. Fatal conditions become
``ok=False`` with a ServiceError; recovered ones become warnings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes
INVALID_ARGUMENT = "INVALID_ARGUMENT"
INVALID_TOTALS = "INVALID_TOTALS"


class ServiceError(BaseModel):
    """Why an operation produced no result."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a service operation.

    Attributes:
        ok: Whether a result was produced.
        op: Operation name (``"average_cubic_weight"``).
        data: Operation payload on success, partial context on failure.
        warnings: Recovered errors met along the way, in order.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

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
        data: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail),
        )
