"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands through
``@click.pass_obj``. Owns the lazily built :class:`Site` and routes results
to stdout/stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folio.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from folio.config.settings import FolioSettings
    from folio.infrastructure.site import Site
    from folio.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: FolioSettings) -> None:
        self.settings = settings
        self._site: Site | None = None

        from folio.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def site(self) -> Site:
        """The site (created on first access, so ``--help`` stays cheap)."""
        if self._site is None:
            from folio.infrastructure.site import Site

            self._site = Site(self.settings)
        return self._site

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; failures go to stderr and exit with code 1.

        Warnings go to stderr in human mode so piped output stays clean; in
        JSON mode they are already part of the payload.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
