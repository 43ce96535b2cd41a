"""Markdown to HTML conversion with Python-Markdown and Pygments.

A fresh :class:`markdown.Markdown` instance is built for every conversion:
the instance (and its footnote and toc extensions) keeps state between
``convert`` calls, and a private instance also keeps rendering of many pages
in parallel safe.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from xml.etree.ElementTree import Element

import markdown
from markdown.extensions import Extension
from markdown.extensions.codehilite import CodeHiliteExtension
from markdown.extensions.toc import TocExtension
from markdown.treeprocessors import Treeprocessor
from pygments.util import ClassNotFound

from folio.domain.page import Header
from folio.domain.types import InsertAnchor

logger = logging.getLogger(__name__)

INTERNAL_LINK_PREFIX = "./"

_ANCHOR_OPTIONS: dict[InsertAnchor, dict[str, Any]] = {
    InsertAnchor.NONE: {},
    InsertAnchor.LEFT: {"permalink": True, "permalink_leading": True},
    InsertAnchor.RIGHT: {"permalink": True},
    InsertAnchor.HEADING: {"anchorlink": True},
}


class MarkdownRenderError(Exception):
    """Markdown could not be converted to HTML."""


@dataclass(frozen=True)
class RenderContext:
    """Everything a single conversion depends on besides the text."""

    current_permalink: str
    permalinks: Mapping[str, str] = field(default_factory=dict)
    highlight_code: bool = False
    highlight_theme: str = "default"
    insert_anchor: InsertAnchor = InsertAnchor.NONE


@dataclass(frozen=True)
class RenderedMarkdown:
    html: str
    toc: list[Header]


def resolve_internal_link(link: str, permalinks: Mapping[str, str]) -> str:
    """Rewrite ``./path/to/file.md#anchor`` to the target's permalink.

    Raises:
        MarkdownRenderError: If the target is not in *permalinks*.
    """
    target, _, anchor = link.removeprefix(INTERNAL_LINK_PREFIX).partition("#")
    permalink = permalinks.get(target)
    if permalink is None:
        msg = f"Relative link {link} not found."
        raise MarkdownRenderError(msg)
    return f"{permalink}#{anchor}" if anchor else permalink


class _InternalLinkProcessor(Treeprocessor):
    def __init__(self, md: markdown.Markdown, permalinks: Mapping[str, str]) -> None:
        super().__init__(md)
        self.permalinks = permalinks

    def run(self, root: Element) -> None:
        for element in root.iter("a"):
            href = element.get("href", "")
            if href.startswith(INTERNAL_LINK_PREFIX):
                element.set("href", resolve_internal_link(href, self.permalinks))


class InternalLinkExtension(Extension):
    """Resolve ``./`` links against the site permalink index."""

    def __init__(self, permalinks: Mapping[str, str], **kwargs: Any) -> None:
        self.permalinks = permalinks
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:  # noqa: N802
        # After the inline processor (20) has turned link syntax into <a>.
        md.treeprocessors.register(
            _InternalLinkProcessor(md, self.permalinks), "folio_internal_links", 15
        )


def _build_markdown(context: RenderContext) -> markdown.Markdown:
    extensions: list[str | Extension] = [
        "extra",
        TocExtension(**_ANCHOR_OPTIONS[context.insert_anchor]),
        InternalLinkExtension(context.permalinks),
    ]
    if context.highlight_code:
        extensions.append(
            CodeHiliteExtension(
                pygments_style=context.highlight_theme,
                noclasses=True,
                guess_lang=False,
            )
        )
    return markdown.Markdown(extensions=extensions, output_format="html")


def _headers_from_tokens(tokens: list[dict[str, Any]], permalink: str) -> list[Header]:
    return [
        Header(
            level=token["level"],
            id=token["id"],
            title=html.unescape(token["name"]),
            permalink=f"{permalink}#{token['id']}",
            children=_headers_from_tokens(token.get("children", []), permalink),
        )
        for token in tokens
    ]


def markdown_to_html(text: str, context: RenderContext) -> RenderedMarkdown:
    """Convert *text* to HTML and collect its heading outline.

    Raises:
        MarkdownRenderError: On an unresolvable internal link or an unknown
            highlight theme.
    """
    md = _build_markdown(context)
    try:
        rendered = md.convert(text)
    except ClassNotFound as exc:
        msg = f"Unknown highlight theme {context.highlight_theme!r}"
        raise MarkdownRenderError(msg) from exc

    toc = _headers_from_tokens(getattr(md, "toc_tokens", []), context.current_permalink)
    logger.debug("Converted markdown for %s (%d headings)", context.current_permalink, len(toc))
    return RenderedMarkdown(html=rendered, toc=toc)
