"""Main CLI entry point for jsonapi-lint."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from jsonapi_lint import __version__
from jsonapi_lint.cli.commands import lint_command, rules


def configure_logging(verbose: bool) -> None:
    """Send package log records to stderr through rich.

    Args:
        verbose: Show debug records instead of warnings only.
    """
    logger = logging.getLogger("jsonapi_lint")
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_time=False, show_path=verbose)
    )


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def cli(verbose: bool) -> None:
    """jsonapi-lint - check OpenAPI documents against JSON:API 1.0.

    \b
    LINTING:
      jsonapi-lint lint openapi.yaml                 Lint with every rule group
      jsonapi-lint lint openapi.yaml --ruleset member-names
      jsonapi-lint lint openapi.yaml --format json   Machine readable output

    \b
    RULES:
      jsonapi-lint rules list                        List rules and their state
      jsonapi-lint rules show links-object           Show one rule
      jsonapi-lint rules disable member-names        Disable a rule for the project
      jsonapi-lint rules export rules.yaml           Write rules as YAML
    """
    configure_logging(verbose)


cli.add_command(lint_command)
cli.add_command(rules)


if __name__ == "__main__":
    cli()
