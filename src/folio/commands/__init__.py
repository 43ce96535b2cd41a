"""Subcommand modules for folio."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups on the root CLI group.

    Imports are deferred so ``folio --help`` doesn't load the markdown and
    template engines.
    """
    from folio.commands.page import page

    cli.add_command(page)
