"""Slug, path and permalink resolution for a page.

Pure functions, no I/O. Malformed declared values were already rejected by
front matter validation, so resolution itself cannot fail.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from slugify import slugify

from folio.domain.file_info import FileInfo
from folio.domain.frontmatter import PageFrontMatter

FALLBACK_SLUG = "page"


class PermalinkMaker(Protocol):
    """The part of the site configuration identity resolution needs."""

    def make_permalink(self, path: str) -> str: ...


@dataclass(frozen=True)
class Identity:
    """The resolved address of a page."""

    slug: str
    path: str
    permalink: str


def make_slug(text: str) -> str:
    """Slugify *text*, never returning an empty string."""
    return slugify(text) or FALLBACK_SLUG


def resolve_slug(file: FileInfo, meta: PageFrontMatter) -> str:
    """Declared slug if any, else the slugified file or directory name.

    An ``index`` file takes the name of its directory, unless it has no
    directory of its own (bare filename, or directly in the content root).
    """
    if meta.slug is not None:
        return meta.slug.strip()

    if file.is_index and file.path.parent.name and not file.in_content_root:
        return make_slug(file.path.parent.name)
    return make_slug(file.name)


def normalize_path(path: str) -> str:
    """Collapse trailing separators to exactly one."""
    return f"{path.rstrip('/')}/"


def resolve_path(file: FileInfo, meta: PageFrontMatter, slug: str) -> str:
    """Site-relative path of a page, always ending with ``/``.

    Examples:
        >>> resolve_path(FileInfo(), PageFrontMatter(path="/hello-world"), "x")
        'hello-world/'
        >>> resolve_path(FileInfo(components=("posts",)), PageFrontMatter(), "intro")
        'posts/intro/'
    """
    if meta.path is not None:
        path = meta.path.strip().removeprefix("/")
    elif file.components:
        path = "/".join((*file.components, slug))
    else:
        path = slug
    return normalize_path(path)


def resolve_identity(
    file: FileInfo,
    meta: PageFrontMatter,
    config: PermalinkMaker,
) -> Identity:
    """Resolve ``(slug, path, permalink)`` for a page."""
    slug = resolve_slug(file, meta)
    path = resolve_path(file, meta, slug)
    return Identity(slug=slug, path=path, permalink=config.make_permalink(path))
