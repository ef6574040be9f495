"""CLI commands for jsonapi-lint."""

from jsonapi_lint.cli.commands.lint import lint_command
from jsonapi_lint.cli.commands.rules import rules

__all__ = [
    "lint_command",
    "rules",
]
