"""Where a page lives on disk, relative to the content root."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from folio.domain.types import INDEX_NAME

DEFAULT_CONTENT_DIR = "content"


def find_content_components(path: Path, content_dir: str = DEFAULT_CONTENT_DIR) -> list[str]:
    """Directory names between the content root and *path*'s file.

    The content root is the first ancestor named *content_dir*. A path with
    no such ancestor has no components.

    Examples:
        >>> find_content_components(Path("content/posts/intro/start.md"))
        ['posts', 'intro']
        >>> find_content_components(Path("start.md"))
        []
    """
    components: list[str] = []
    in_content = False
    for part in path.parent.parts:
        if in_content:
            components.append(part)
        elif part == content_dir:
            in_content = True
    return components


@dataclass(frozen=True)
class FileInfo:
    """Location info for a page's source file.

    For an ``index`` file the enclosing directory *is* the page, so that
    directory is dropped from :attr:`components` and :attr:`parent` points
    at the directory above it.
    """

    path: Path = field(default_factory=Path)
    name: str = ""
    parent: Path = field(default_factory=Path)
    components: tuple[str, ...] = ()
    in_content_root: bool = False

    @classmethod
    def for_page(cls, path: Path, content_dir: str = DEFAULT_CONTENT_DIR) -> FileInfo:
        path = Path(path)
        parent = path.parent
        name = path.stem
        components = find_content_components(path, content_dir)
        in_content_root = not components and parent.name == content_dir

        if components and name == INDEX_NAME:
            components.pop()
            parent = parent.parent

        return cls(
            path=path,
            name=name,
            parent=parent,
            components=tuple(components),
            in_content_root=in_content_root,
        )

    @property
    def is_index(self) -> bool:
        return self.name == INDEX_NAME
