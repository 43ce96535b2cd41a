"""Error taxonomy for page resolution.

Every failure is deterministic for a given input, so nothing here is retried.
Each error carries the source path of the page it belongs to so callers can
point at the offending file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class FolioError(Exception):
    """Base exception for all page resolution failures."""

    code: str = "FOLIO_ERROR"

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def to_detail(self) -> dict[str, Any]:
        """Structured detail payload for a ``ServiceError``."""
        detail: dict[str, Any] = {}
        if self.path is not None:
            detail["path"] = str(self.path)
        if self.__cause__ is not None:
            detail["cause"] = str(self.__cause__)
        return detail


class MalformedMetadataError(FolioError):
    """Front matter is missing, unterminated, or fails validation."""

    code = "MALFORMED_METADATA"


class ReadFailureError(FolioError):
    """The source file could not be read."""

    code = "READ_FAILURE"


class RenderFailureError(FolioError):
    """Markdown conversion failed for a page."""

    code = "RENDER_FAILURE"


class TemplateFailureError(FolioError):
    """The template engine failed to produce a page."""

    code = "TEMPLATE_FAILURE"
