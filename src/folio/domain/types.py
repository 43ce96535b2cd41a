"""Classification enums shared by the domain and rendering layers."""

from __future__ import annotations

from enum import StrEnum


class InsertAnchor(StrEnum):
    """Where clickable anchors are inserted for rendered headings."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    HEADING = "heading"


INDEX_NAME = "index"
SUMMARY_MARKER = "<!-- more -->"
DEFAULT_TEMPLATE = "page.html"
CONTENT_EXTENSIONS = frozenset({".md"})
