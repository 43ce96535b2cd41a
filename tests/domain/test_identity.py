"""Tests for slug, path and permalink resolution."""

from pathlib import Path

import pytest

from folio.config.models import SiteConfig
from folio.domain.file_info import FileInfo
from folio.domain.frontmatter import PageFrontMatter
from folio.domain.identity import (
    FALLBACK_SLUG,
    make_slug,
    normalize_path,
    resolve_identity,
    resolve_path,
    resolve_slug,
)

CONFIG = SiteConfig(base_url="http://hello.com/")


def _info(path: str) -> FileInfo:
    return FileInfo.for_page(Path(path))


class TestResolveSlug:
    def test_declared_slug_is_trimmed_verbatim(self) -> None:
        meta = PageFrontMatter(slug="  Hello World!  ")
        assert resolve_slug(_info("content/posts/start.md"), meta) == "Hello World!"

    def test_declared_slug_wins_for_index_files(self) -> None:
        meta = PageFrontMatter(slug="hey")
        assert resolve_slug(_info("content/posts/with-assets/index.md"), meta) == "hey"

    def test_slugifies_file_stem(self) -> None:
        assert resolve_slug(_info(" file with space.md"), PageFrontMatter()) == "file-with-space"

    def test_index_takes_directory_name(self) -> None:
        info = _info("content/posts/My Assets/index.md")
        assert resolve_slug(info, PageFrontMatter()) == "my-assets"

    def test_bare_index_falls_back_to_stem(self) -> None:
        assert resolve_slug(_info("index.md"), PageFrontMatter()) == "index"

    def test_index_in_content_root_falls_back_to_stem(self) -> None:
        assert resolve_slug(_info("content/index.md"), PageFrontMatter()) == "index"

    def test_unsluggable_name_uses_fallback(self) -> None:
        assert resolve_slug(_info("!!!.md"), PageFrontMatter()) == FALLBACK_SLUG


class TestMakeSlug:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Hello World", "hello-world"),
            ("--a__b--", "a-b"),
            ("C'est déjà l'été", "c-est-deja-l-ete"),
            ("", FALLBACK_SLUG),
        ],
    )
    def test_make_slug(self, text: str, expected: str) -> None:
        assert make_slug(text) == expected


class TestResolvePath:
    def test_components_and_slug(self) -> None:
        info = _info("content/posts/intro/start.md")
        assert resolve_path(info, PageFrontMatter(), "hello-world") == "posts/intro/hello-world/"

    def test_slug_only(self) -> None:
        assert resolve_path(_info("start.md"), PageFrontMatter(), "hello-world") == "hello-world/"

    def test_declared_path_replaces_components(self) -> None:
        meta = PageFrontMatter(path="hello-world")
        assert resolve_path(_info("content/posts/intro/start.md"), meta, "x") == "hello-world/"

    def test_declared_path_leading_slash_stripped(self) -> None:
        meta = PageFrontMatter(path=" /hello-world ")
        assert resolve_path(_info("start.md"), meta, "x") == "hello-world/"

    def test_declared_root_path(self) -> None:
        assert resolve_path(_info("start.md"), PageFrontMatter(path="/"), "x") == "/"

    def test_trailing_separators_collapse(self) -> None:
        meta = PageFrontMatter(path="docs/guide//")
        assert resolve_path(_info("start.md"), meta, "x") == "docs/guide/"

    def test_normalize_path(self) -> None:
        assert normalize_path("a") == "a/"
        assert normalize_path("a/") == "a/"
        assert normalize_path("") == "/"


class TestResolveIdentity:
    def test_declared_slug_in_nested_directory(self) -> None:
        identity = resolve_identity(
            _info("content/posts/intro/start.md"), PageFrontMatter(slug="hello-world"), CONFIG
        )
        assert identity.slug == "hello-world"
        assert identity.path == "posts/intro/hello-world/"
        assert identity.permalink == "http://hello.com/posts/intro/hello-world/"

    def test_index_page_path_uses_directory(self) -> None:
        identity = resolve_identity(
            _info("content/posts/with-assets/index.md"), PageFrontMatter(), CONFIG
        )
        assert identity.slug == "with-assets"
        assert identity.path == "posts/with-assets/"

    @pytest.mark.parametrize(
        ("path", "meta"),
        [
            ("content/a/b/c.md", PageFrontMatter()),
            ("c.md", PageFrontMatter(slug="x")),
            ("content/a/index.md", PageFrontMatter()),
            ("content/a/c.md", PageFrontMatter(path="/deep/nested///")),
            ("content/a/c.md", PageFrontMatter(path="flat")),
        ],
    )
    def test_path_shape_and_permalink_derivation(self, path: str, meta: PageFrontMatter) -> None:
        identity = resolve_identity(_info(path), meta, CONFIG)
        assert identity.slug
        assert not identity.path.startswith("/")
        assert identity.path.endswith("/")
        assert not identity.path.endswith("//")
        assert identity.permalink == CONFIG.make_permalink(identity.path)
