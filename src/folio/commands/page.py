"""Command group: resolve and render single content pages."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from folio.commands._base import FolioGroup

if TYPE_CHECKING:
    from folio.commands._context import AppContext

_PAGE_EXAMPLES = """\
  folio page resolve content/posts/hello.md
  folio --json page resolve content/posts/with-assets/index.md
  folio page render content/posts/hello.md --output public/posts/hello/index.html"""

_PAGE_PATH = click.Path(dir_okay=False, path_type=Path)


@click.group(cls=FolioGroup, examples=_PAGE_EXAMPLES)
@click.pass_obj
def page(app: AppContext) -> None:
    """Resolve and render single content pages."""


@page.command(
    examples="""\
  folio page resolve content/about.md
  folio -v page resolve content/posts/hello.md"""
)
@click.argument("path", type=_PAGE_PATH)
@click.pass_obj
def resolve(app: AppContext, path: Path) -> None:
    """Show a page's slug, path, permalink, outline and analytics."""
    from folio.services.pages import PageService

    app.emit(PageService(app.site).resolve_page(path))


@page.command(
    examples="""\
  folio page render content/posts/hello.md
  folio page render content/posts/hello.md --output public/posts/hello/index.html"""
)
@click.argument("path", type=_PAGE_PATH)
@click.option(
    "--output",
    type=_PAGE_PATH,
    default=None,
    help="Write the HTML document here instead of stdout.",
)
@click.pass_obj
def render(app: AppContext, path: Path, output: Path | None) -> None:
    """Render a page through its template into a full HTML document."""
    from folio.services.pages import PageService

    result = PageService(app.site).render_page(path)
    if result.ok and output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.data["html"], encoding="utf-8")
        data = {key: value for key, value in result.data.items() if key != "html"}
        data["output"] = str(output)
        result = result.model_copy(update={"data": data})
    app.emit(result)
