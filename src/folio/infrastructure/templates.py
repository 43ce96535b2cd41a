"""Jinja2 template loading with site and theme overrides.

Lookup order for a template name:

1. ``<site>/templates/<name>``
2. ``<site>/themes/<theme>/templates/<name>`` (when a theme is configured)
3. the packaged built-in ``folio/templates/<name>``
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    PrefixLoader,
    StrictUndefined,
    Template,
    select_autoescape,
)

BUILTIN_PREFIX = "__folio_builtins"


def build_template_environment(site_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with site templates before built-ins.

    Theme templates are reachable as ``<theme>/templates/<name>`` and are
    only tried through :func:`select_template`.
    """
    loaders: list[BaseLoader] = []
    if site_root is not None:
        loaders.append(FileSystemLoader(str(site_root / "templates")))
        loaders.append(FileSystemLoader(str(site_root / "themes")))
    loaders.append(PrefixLoader({BUILTIN_PREFIX: PackageLoader("folio", "templates")}))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def template_candidates(name: str, theme: str | None = None) -> list[str]:
    candidates = [name]
    if theme:
        candidates.append(f"{theme}/templates/{name}")
    candidates.append(f"{BUILTIN_PREFIX}/{name}")
    return candidates


def select_template(env: Environment, name: str, theme: str | None = None) -> Template:
    """Load *name* following the override order.

    Raises:
        jinja2.TemplatesNotFound: If no candidate exists.
    """
    return env.select_template(template_candidates(name, theme))
