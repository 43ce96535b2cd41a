"""Page assembly — parsing, markdown rendering, and page templating.

The module-level functions are the building blocks and raise
:class:`~folio.domain.errors.FolioError` subclasses. :class:`PageService`
drives them for one file at a time and returns ServiceResult envelopes.

Rendering needs the permalink of every page (links may point anywhere in
the site), so the permalink index is built in full before any markdown is
converted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import TemplateError, TemplateNotFound

from folio.domain.errors import FolioError, RenderFailureError, TemplateFailureError
from folio.domain.frontmatter import split_page_content
from folio.domain.identity import resolve_identity
from folio.domain.page import Page, to_view_model
from folio.domain.types import DEFAULT_TEMPLATE, InsertAnchor
from folio.infrastructure.filesystem import find_related_assets, read_file
from folio.infrastructure.rendering import MarkdownRenderError, RenderContext, markdown_to_html
from folio.infrastructure.templates import select_template
from folio.services.base import BaseService
from folio.services.result import ServiceResult

if TYPE_CHECKING:
    from jinja2 import Environment

    from folio.config.models import MarkdownConfig, SiteConfig
    from folio.infrastructure.site import Site

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def parse(file_path: Path, content: str, config: SiteConfig) -> Page:
    """Parse a page from the text of its ``.md`` file.

    Files without front matter, or with invalid front matter, are errors.
    Nothing is read from disk.

    Raises:
        MalformedMetadataError: If the front matter can't be split or validated.
    """
    meta, body = split_page_content(file_path, content)
    page = Page.new(file_path, meta, content_dir=config.content_dir)
    page.raw_content = body

    identity = resolve_identity(page.file, meta, config)
    page.slug = identity.slug
    page.path = identity.path
    page.permalink = identity.permalink
    return page


def from_file(path: Path, config: SiteConfig) -> Page:
    """Read and parse a ``.md`` file.

    An ``index`` page also collects the non-markdown files next to it.

    Raises:
        ReadFailureError: If the file can't be read.
        MalformedMetadataError: If the front matter is invalid.
    """
    page = parse(path, read_file(path), config)
    if page.file.is_index:
        page.assets = find_related_assets(path.parent)
    return page


def render_markdown(
    page: Page,
    permalinks: Mapping[str, str],
    config: MarkdownConfig,
    insert_anchor: InsertAnchor | None = None,
) -> None:
    """Render the page body, table of contents and summary in place.

    The summary is the text before the first summary marker, converted on
    its own with the same context. Nothing on *page* changes unless every
    conversion succeeds.

    Raises:
        RenderFailureError: If conversion fails (e.g. a dangling ``./`` link).
    """
    context = RenderContext(
        current_permalink=page.permalink,
        permalinks=permalinks,
        highlight_code=config.highlight_code,
        highlight_theme=config.highlight_theme,
        insert_anchor=insert_anchor if insert_anchor is not None else config.insert_anchor,
    )
    marker = config.summary_marker
    try:
        rendered = markdown_to_html(page.raw_content, context)
        summary = None
        if marker in page.raw_content:
            before_marker = page.raw_content.split(marker, 1)[0]
            summary = markdown_to_html(before_marker, context).html
    except MarkdownRenderError as exc:
        msg = f"Failed to render markdown of '{page.file.path}': {exc}"
        raise RenderFailureError(msg, path=page.file.path) from exc

    page.content = rendered.html
    page.toc = rendered.toc
    page.summary = summary


def template_name(page: Page) -> str:
    """The template declared in front matter, or ``page.html``."""
    if page.meta.template is not None:
        return page.meta.template.strip()
    return DEFAULT_TEMPLATE


def render_html(
    page: Page,
    env: Environment,
    config: SiteConfig,
    siblings: Mapping[str, Page] | None = None,
) -> str:
    """Render the full HTML document for *page*.

    The template is looked up before anything is rendered, so an unknown
    template name fails on its own.

    Raises:
        TemplateFailureError: If the template is unknown or fails to render.
    """
    name = template_name(page)
    try:
        template = select_template(env, name, config.theme)
    except TemplateNotFound as exc:
        msg = f"Template '{name}' used by page '{page.file.path}' does not exist"
        raise TemplateFailureError(msg, path=page.file.path) from exc
    except TemplateError as exc:
        msg = f"Template '{name}' used by page '{page.file.path}' is invalid"
        raise TemplateFailureError(msg, path=page.file.path) from exc

    context: dict[str, Any] = {
        "config": config.model_dump(mode="json"),
        "page": to_view_model(page, siblings).model_dump(mode="json"),
        "current_url": page.permalink,
        "current_path": page.path,
    }
    try:
        return template.render(**context)
    except TemplateError as exc:
        msg = f"Failed to render page '{page.file.path}'"
        raise TemplateFailureError(msg, path=page.file.path) from exc


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class PageService(BaseService):
    """Resolve and render single pages of a site."""

    def __init__(self, site: Site) -> None:
        super().__init__(site)
        self._permalinks: dict[str, str] | None = None
        self._index_warnings: list[str] = []

    def permalink_index(self) -> tuple[dict[str, str], list[str]]:
        """Map every content file's key (``posts/a.md``) to its permalink.

        Files that fail to parse are left out and reported as warnings.
        Built once per service instance.
        """
        if self._permalinks is None:
            permalinks: dict[str, str] = {}
            warnings: list[str] = []
            for path in self._site.content_files():
                key = self._site.content_key(path)
                try:
                    page = from_file(path, self._site.config)
                except FolioError as exc:
                    warnings.append(f"Skipped {key}: {exc.message}")
                    continue
                permalinks[key] = page.permalink
            logger.debug("Indexed %d permalinks under %s", len(permalinks), self._site.content_root)
            self._permalinks = permalinks
            self._index_warnings = warnings
        return self._permalinks, list(self._index_warnings)

    def _load(self, path: Path, warnings: list[str]) -> Page:
        page = from_file(path, self._site.config)
        permalinks, index_warnings = self.permalink_index()
        warnings.extend(index_warnings)
        render_markdown(page, permalinks, self._site.markdown)
        return page

    def resolve_page(self, path: Path) -> ServiceResult:
        """Parse and render one page, returning its view model."""
        op = "resolve_page"
        warnings: list[str] = []
        try:
            page = self._load(path, warnings)
        except FolioError as exc:
            return self._failure(op, exc, warnings)

        data = to_view_model(page).model_dump(mode="json")
        data["source"] = str(path)
        data["draft"] = page.is_draft
        data["assets"] = [str(asset) for asset in page.assets]
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def render_page(self, path: Path) -> ServiceResult:
        """Parse, render and template one page into an HTML document."""
        op = "render_page"
        warnings: list[str] = []
        try:
            page = self._load(path, warnings)
            html = render_html(page, self._site.environment, self._site.config)
        except FolioError as exc:
            return self._failure(op, exc, warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": str(path),
                "template": template_name(page),
                "path": page.path,
                "permalink": page.permalink,
                "html": html,
            },
            warnings=warnings,
        )
