"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, folio.toml only contains
overrides. A fresh site needs only ``[site] base_url``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from folio.domain.types import SUMMARY_MARKER, InsertAnchor


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    base_url: str = "http://a-website.com"
    title: str | None = None
    description: str | None = None
    theme: str | None = None
    content_dir: str = "content"
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("base_url")
    @classmethod
    def _base_url_not_empty(cls, value: str) -> str:
        if not value.strip():
            msg = "base_url can't be empty"
            raise ValueError(msg)
        return value.strip()

    def make_permalink(self, path: str) -> str:
        """Join ``base_url`` and a site-relative *path* into an absolute URL.

        Exactly one ``/`` separates the two halves and the result always
        ends with ``/``.

        Examples:
            >>> SiteConfig(base_url="http://hello.com/").make_permalink("/posts/a")
            'http://hello.com/posts/a/'
            >>> SiteConfig(base_url="http://hello.com").make_permalink("/")
            'http://hello.com/'
        """
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        if not url.endswith("/"):
            url = f"{url}/"
        return url


class MarkdownConfig(BaseModel):
    """[markdown] section."""

    model_config = {"frozen": True}

    highlight_code: bool = False
    highlight_theme: str = "default"
    insert_anchor: InsertAnchor = InsertAnchor.NONE
    summary_marker: str = SUMMARY_MARKER
