"""Tests for template lookup order."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from folio.infrastructure.templates import (
    BUILTIN_PREFIX,
    build_template_environment,
    select_template,
    template_candidates,
)


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


class TestTemplateCandidates:
    def test_without_theme(self) -> None:
        assert template_candidates("page.html") == ["page.html", f"{BUILTIN_PREFIX}/page.html"]

    def test_with_theme(self) -> None:
        assert template_candidates("page.html", "sample") == [
            "page.html",
            "sample/templates/page.html",
            f"{BUILTIN_PREFIX}/page.html",
        ]


class TestSelectTemplate:
    def test_builtin_page_template(self, tmp_path: Path) -> None:
        env = build_template_environment(tmp_path)
        template = select_template(env, "page.html")
        assert template.filename is not None
        source = Path(template.filename)
        assert source.name == "page.html"
        assert source.parent.name == "templates"
        assert source.parent.parent.name == "folio"

    def test_site_template_overrides_builtin(self, tmp_path: Path) -> None:
        _write(tmp_path / "templates" / "page.html", "site")
        env = build_template_environment(tmp_path)
        assert select_template(env, "page.html").render() == "site"

    def test_theme_template(self, tmp_path: Path) -> None:
        _write(tmp_path / "themes" / "sample" / "templates" / "post.html", "theme")
        env = build_template_environment(tmp_path)
        assert select_template(env, "post.html", "sample").render() == "theme"

    def test_site_wins_over_theme(self, tmp_path: Path) -> None:
        _write(tmp_path / "themes" / "sample" / "templates" / "post.html", "theme")
        _write(tmp_path / "templates" / "post.html", "site")
        env = build_template_environment(tmp_path)
        assert select_template(env, "post.html", "sample").render() == "site"

    def test_unknown_template(self, tmp_path: Path) -> None:
        env = build_template_environment(tmp_path)
        with pytest.raises(TemplateNotFound):
            select_template(env, "missing.html")

    def test_without_site_root(self) -> None:
        env = build_template_environment()
        template = select_template(env, "page.html")
        assert template.filename is not None
        assert "<!DOCTYPE html>" in Path(template.filename).read_text(encoding="utf-8")


class TestEnvironment:
    def test_autoescape(self, tmp_path: Path) -> None:
        _write(tmp_path / "templates" / "x.html", "{{ value }}")
        env = build_template_environment(tmp_path)
        assert select_template(env, "x.html").render(value="<b>") == "&lt;b&gt;"

    def test_undefined_is_an_error(self, tmp_path: Path) -> None:
        _write(tmp_path / "templates" / "x.html", "{{ nope }}")
        env = build_template_environment(tmp_path)
        with pytest.raises(UndefinedError):
            select_template(env, "x.html").render()
