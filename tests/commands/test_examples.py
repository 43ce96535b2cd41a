"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from folio.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["page", "--examples"], ["folio page resolve", "folio page render"]),
    (["page", "resolve", "--examples"], ["folio -v page resolve"]),
    (["page", "render", "--examples"], ["--output public/"]),
]


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=["_".join(a for a in args if a != "--examples") for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


class TestExamplesEagerExit:
    def test_examples_skips_required_args(self, cli_runner: CliRunner) -> None:
        # PATH is required, but --examples exits first.
        result = cli_runner.invoke(cli, ["page", "render", "--examples"])
        assert result.exit_code == 0
