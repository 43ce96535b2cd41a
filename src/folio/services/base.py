"""BaseService — foundation for folio services.

Every service receives a :class:`Site` at construction time and reaches the
filesystem, configuration and template engine only through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from folio.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from folio.domain.errors import FolioError
    from folio.infrastructure.site import Site

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PageService(BaseService):
            def resolve_page(self, path: Path) -> ServiceResult:
                try:
                    page = from_file(path, self._site.config)
                except FolioError as exc:
                    return self._failure("resolve_page", exc)
                ...
    """

    def __init__(self, site: Site) -> None:
        self._site = site

    @staticmethod
    def _failure(
        op: str,
        exc: FolioError,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Fold a FolioError into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc.message, exc_info=exc)
        return ServiceResult(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError.from_exception(exc),
        )
