"""Page front matter schema and the front matter / body splitter.

Front matter is a YAML block fenced by ``---`` lines at the head of the
file. Every field is optional; a page with an empty block is valid. A page
without a block, or whose block never closes, is malformed.
"""

from __future__ import annotations

import datetime as dt
import textwrap
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from folio.domain.errors import MalformedMetadataError

_FRONTMATTER_DELIMITER = "---"


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader.

    ruamel.yaml's YAML object is stateful, so one instance per parse keeps a
    failed load from leaking into the next one.
    """
    return YAML(typ="safe", pure=True)


def _scalar_to_string(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class PageFrontMatter(BaseModel):
    """Fields a page may declare in its front matter."""

    model_config = {"frozen": True}

    title: str | None = None
    description: str | None = None
    date: str | None = None
    slug: str | None = None
    path: str | None = None
    template: str | None = None
    draft: bool | None = None
    category: str | None = None
    tags: list[str] | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_string(cls, value: Any) -> Any:
        # YAML turns bare dates into date/datetime objects.
        if isinstance(value, (dt.date, dt.datetime)):
            return value.isoformat()
        return value

    @field_validator("title", "description", "slug", "template", "category", mode="before")
    @classmethod
    def _number_to_string(cls, value: Any) -> Any:
        # `slug: 2020` arrives from YAML as an int.
        return _scalar_to_string(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_numbers_to_strings(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_scalar_to_string(tag) for tag in value]
        return value

    @field_validator("slug")
    @classmethod
    def _slug_not_empty(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            msg = "`slug` can't be empty if present"
            raise ValueError(msg)
        return value

    @field_validator("path")
    @classmethod
    def _path_is_site_relative(cls, value: str | None) -> str | None:
        if value is None:
            return value
        stripped = value.strip()
        if not stripped:
            msg = "`path` can't be empty if present"
            raise ValueError(msg)
        if stripped.startswith("//"):
            msg = f"`path` {value!r} must not start with more than one '/'"
            raise ValueError(msg)
        if any(segment in (".", "..") for segment in stripped.split("/")):
            msg = f"`path` {value!r} must not contain '.' or '..' segments"
            raise ValueError(msg)
        return value

    @field_validator("template")
    @classmethod
    def _template_not_empty(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            msg = "`template` can't be empty if present"
            raise ValueError(msg)
        return value


def split_page_content(file_path: Path, content: str) -> tuple[PageFrontMatter, str]:
    """Split *content* into validated front matter and the markdown body.

    Leading blank lines before the opening ``---`` are ignored, and an
    indented block is dedented before YAML parsing. Handles both ``\\n`` and
    ``\\r\\n`` line endings, and a leading UTF-8 byte order mark.

    Raises:
        MalformedMetadataError: If either delimiter is missing, the block is
            not a YAML mapping, or it fails :class:`PageFrontMatter`
            validation.
    """
    lines = content.removeprefix("\ufeff").replace("\r\n", "\n").split("\n")

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    if start == len(lines) or lines[start].strip() != _FRONTMATTER_DELIMITER:
        msg = f"Couldn't find front matter in '{file_path}'. Did you forget to add `---`?"
        raise MalformedMetadataError(msg, path=file_path)

    end_idx: int | None = None
    for i in range(start + 1, len(lines)):
        if lines[i].strip() == _FRONTMATTER_DELIMITER:
            end_idx = i
            break

    if end_idx is None:
        msg = f"Front matter in '{file_path}' is missing its closing `---`"
        raise MalformedMetadataError(msg, path=file_path)

    yaml_block = textwrap.dedent("\n".join(lines[start + 1 : end_idx]))
    body = "\n".join(lines[end_idx + 1 :])

    try:
        data = _new_yaml().load(yaml_block)
    except YAMLError as exc:
        msg = f"Error when parsing front matter of '{file_path}'"
        raise MalformedMetadataError(msg, path=file_path) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Front matter of '{file_path}' must be a mapping, got {type(data).__name__}"
        raise MalformedMetadataError(msg, path=file_path)

    try:
        meta = PageFrontMatter.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid front matter in '{file_path}'"
        raise MalformedMetadataError(msg, path=file_path) from exc

    return meta, body
