"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: PageService methods return ServiceResult and never raise
FolioError; the error taxonomy is folded into ``ServiceError.code``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from folio.domain.errors import FolioError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: FolioError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.to_detail())


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"resolve_page"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as sibling pages skipped while
            building the permalink index.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
