"""Site — the single dependency injected into every service.

The Site owns the settings snapshot, the content root, and a lazily built
Jinja2 environment. It is read-only once constructed, so one Site can back
any number of page resolutions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from folio.infrastructure.filesystem import find_content_files
from folio.infrastructure.templates import build_template_environment

if TYPE_CHECKING:
    from jinja2 import Environment

    from folio.config.models import MarkdownConfig, SiteConfig
    from folio.config.settings import FolioSettings

logger = logging.getLogger(__name__)


class Site:
    """A site directory: ``folio.toml``, ``content/``, ``templates/``, ``themes/``."""

    def __init__(self, settings: FolioSettings) -> None:
        self.settings = settings
        self._environment: Environment | None = None

    @property
    def root(self) -> Path:
        return self.settings.site_root

    @property
    def config(self) -> SiteConfig:
        return self.settings.site

    @property
    def markdown(self) -> MarkdownConfig:
        return self.settings.markdown

    @property
    def content_root(self) -> Path:
        return self.settings.content_root

    @property
    def environment(self) -> Environment:
        """The template environment (created lazily on first access)."""
        if self._environment is None:
            logger.debug("Building template environment for %s", self.root)
            self._environment = build_template_environment(self.root)
        return self._environment

    def content_files(self) -> list[Path]:
        return find_content_files(self.content_root)

    def content_key(self, path: Path) -> str:
        """The name other pages use to link to *path*: ``posts/hello.md``.

        Paths outside the content root are keyed by their own posix form.
        """
        resolved = path.resolve()
        root = self.content_root.resolve()
        if resolved.is_relative_to(root):
            return resolved.relative_to(root).as_posix()
        return path.as_posix()
