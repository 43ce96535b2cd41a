"""Tests for FileInfo and content component discovery."""

from pathlib import Path

from folio.domain.file_info import FileInfo, find_content_components


class TestFindContentComponents:
    def test_components_after_content_dir(self) -> None:
        assert find_content_components(Path("content/posts/intro/start.md")) == ["posts", "intro"]

    def test_no_content_dir(self) -> None:
        assert find_content_components(Path("start.md")) == []
        assert find_content_components(Path("site/posts/start.md")) == []

    def test_custom_content_dir(self) -> None:
        path = Path("docs/guide/setup.md")
        assert find_content_components(path, "docs") == ["guide"]

    def test_absolute_path(self, tmp_path: Path) -> None:
        path = tmp_path / "content" / "a" / "b.md"
        assert find_content_components(path) == ["a"]


class TestFileInfo:
    def test_regular_page(self) -> None:
        info = FileInfo.for_page(Path("content/posts/intro/start.md"))
        assert info.name == "start"
        assert info.parent == Path("content/posts/intro")
        assert info.components == ("posts", "intro")
        assert info.is_index is False

    def test_index_page_drops_own_directory(self) -> None:
        info = FileInfo.for_page(Path("content/posts/with-assets/index.md"))
        assert info.is_index is True
        assert info.components == ("posts",)
        assert info.parent == Path("content/posts")

    def test_index_in_content_root(self) -> None:
        info = FileInfo.for_page(Path("content/index.md"))
        assert info.components == ()
        assert info.in_content_root is True
        assert info.parent == Path("content")

    def test_default_is_empty(self) -> None:
        info = FileInfo()
        assert info.name == ""
        assert info.components == ()
