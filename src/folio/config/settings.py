"""Unified settings — CLI flags, env vars, and folio.toml in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FOLIO_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``folio.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from folio.config.discovery import find_config
from folio.config.models import MarkdownConfig, SiteConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the ``[site]`` and ``[markdown]`` tables from folio.toml."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return {key: value for key, value in self._data.items() if key in ("site", "markdown")}


# TOML path handed to settings_customise_sources during construction.
_pending = threading.local()


class FolioSettings(BaseSettings):
    """Everything a folio invocation is configured with.

    Attributes:
        site_root: Directory holding ``folio.toml`` (or CWD without one).
            The content, templates and themes directories live under it.
        config_path: The TOML file actually loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FOLIO_",
        "env_nested_delimiter": "__",
    }

    site_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    site: SiteConfig = Field(default_factory=SiteConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None)),
        )

    @property
    def content_root(self) -> Path:
        return self.site_root / self.site.content_dir

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        site_root: Path | None = None,
        **cli_flags: Any,
    ) -> FolioSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* wins over discovery; the site root
        defaults to the directory of whichever TOML file was found.
        """
        toml_path: Path | None
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(site_root)

        if site_root is None:
            site_root = toml_path.parent if toml_path else Path.cwd()

        _pending.toml_path = toml_path
        try:
            return cls(site_root=site_root, config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None
