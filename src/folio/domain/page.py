"""Page entity, table of contents entries, and the template-facing view.

A :class:`Page` is built in stages: parsing fills location, front matter,
raw body and identity; rendering fills ``content``, ``toc`` and
``summary``; a site-wide aggregator may then set ``previous``/``next``.
Siblings are referenced by permalink, never embedded, and resolved through
a lookup mapping at projection time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from folio.domain.file_info import DEFAULT_CONTENT_DIR, FileInfo
from folio.domain.frontmatter import PageFrontMatter
from folio.domain.reading import reading_analytics


class Header(BaseModel):
    """A heading of the rendered body, nested by level."""

    model_config = {"frozen": True}

    level: int
    id: str
    title: str
    permalink: str
    children: list[Header] = Field(default_factory=list)


@dataclass
class Page:
    """A content file resolved into an addressable, renderable page."""

    file: FileInfo = field(default_factory=FileInfo)
    meta: PageFrontMatter = field(default_factory=PageFrontMatter)
    raw_content: str = ""
    # Non-markdown files next to an index page, in discovery order.
    assets: list[Path] = field(default_factory=list)
    content: str = ""
    slug: str = ""
    path: str = ""
    permalink: str = ""
    summary: str | None = None
    previous: str | None = None  # permalink of the previous sibling
    next: str | None = None  # permalink of the next sibling
    toc: list[Header] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        file_path: Path,
        meta: PageFrontMatter,
        *,
        content_dir: str = DEFAULT_CONTENT_DIR,
    ) -> Page:
        """An unresolved page for *file_path* with its front matter."""
        return cls(file=FileInfo.for_page(file_path, content_dir), meta=meta)

    @property
    def is_draft(self) -> bool:
        return bool(self.meta.draft)


class PageView(BaseModel):
    """Template-facing projection of a :class:`Page`."""

    model_config = {"frozen": True}

    content: str
    title: str | None = None
    description: str | None = None
    date: str | None = None
    slug: str
    path: str
    permalink: str
    summary: str | None = None
    tags: list[str] | None = None
    category: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)
    word_count: int
    reading_time: int
    previous: PageView | None = None
    next: PageView | None = None
    toc: list[Header] = Field(default_factory=list)


def _project(
    page: Page,
    *,
    previous: PageView | None = None,
    next_page: PageView | None = None,
) -> PageView:
    word_count, reading_time = reading_analytics(page.raw_content)
    return PageView(
        content=page.content,
        title=page.meta.title,
        description=page.meta.description,
        date=page.meta.date,
        slug=page.slug,
        path=page.path,
        permalink=page.permalink,
        summary=page.summary,
        tags=list(page.meta.tags) if page.meta.tags is not None else None,
        category=page.meta.category,
        extra=dict(page.meta.extra),
        word_count=word_count,
        reading_time=reading_time,
        previous=previous,
        next=next_page,
        toc=list(page.toc),
    )


def to_view_model(page: Page, siblings: Mapping[str, Page] | None = None) -> PageView:
    """Project *page* into a :class:`PageView`.

    ``previous``/``next`` are looked up by permalink in *siblings* and
    projected one level deep: their own ``previous``/``next`` are ``None``.
    Unknown or missing siblings project to ``None``. *page* is not modified.
    """
    lookup = siblings or {}

    def sibling(key: str | None) -> PageView | None:
        if key is None or key not in lookup:
            return None
        return _project(lookup[key])

    return _project(page, previous=sibling(page.previous), next_page=sibling(page.next))
