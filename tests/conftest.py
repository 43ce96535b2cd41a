"""Shared pytest fixtures for folio tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from folio.config.models import SiteConfig
from folio.config.settings import FolioSettings
from folio.infrastructure.site import Site

WritePage = Callable[[str, str], Path]


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FOLIO_CONFIG from leaking into tests."""
    monkeypatch.delenv("FOLIO_CONFIG", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Temporary site directory with a content root and a folio.toml.

    This is the single source of truth for the site directory layout.
    """
    (tmp_path / "content" / "posts").mkdir(parents=True)
    (tmp_path / "folio.toml").write_text('[site]\nbase_url = "http://hello.com/"\n')
    return tmp_path


@pytest.fixture
def site(site_root: Path) -> Site:
    return Site(FolioSettings.from_cli(site_root=site_root))


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig(base_url="http://hello.com/")


@pytest.fixture
def write_page(site_root: Path) -> WritePage:
    """Write a file under the site's content root and return its path."""

    def _write(relative: str, text: str) -> Path:
        path = site_root / "content" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_site(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp site root so the CLI discovers its folio.toml."""
    monkeypatch.chdir(site_root)
