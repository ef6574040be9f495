"""Tests for the command line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest
import yaml
from click.testing import CliRunner

from jsonapi_lint import __version__
from jsonapi_lint.cli.main import cli
from jsonapi_lint.rules.config import find_config, load_config
from jsonapi_lint.rules.engine import load_rules_from_yaml

FOUR_XX_RULE = "errors-processing-errors-no-multiple-4xx-codes"


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Remove the handler the CLI attaches to the package logger."""
    yield
    logger = logging.getLogger("jsonapi_lint")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def runner() -> CliRunner:
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def document_path(fixtures_dir: Path) -> str:
    """Path of the compliant document."""
    return str(fixtures_dir / "valid_api_document.yaml")


@pytest.fixture
def config_path(project_dir: Path) -> Path:
    """Configuration location inside the project directory."""
    return find_config(project_dir)


class TestLintCommand:
    """Tests for jsonapi-lint lint."""

    def test_version(self, runner: CliRunner) -> None:
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_clean_document(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test a group the document satisfies."""
        result = runner.invoke(
            cli,
            ["lint", document_path, "--ruleset", "member-names", "--config", str(config_path)],
        )

        assert result.exit_code == 0
        assert "No problems found" in result.output

    def test_results_fail_the_command(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test that error results exit with 1 and are listed as JSON."""
        result = runner.invoke(
            cli, ["lint", document_path, "--format", "json", "--config", str(config_path)]
        )

        assert result.exit_code == 1
        results = json.loads(result.output)
        assert {item["code"] for item in results} == {FOUR_XX_RULE}
        assert results[0] == {
            "code": FOUR_XX_RULE,
            "message": "paths./users.get.responses - Responses should not contain multiple 4XX status codes",
            "path": ["paths", "/users", "get", "responses"],
            "severity": "error",
        }

    def test_table_output(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test the summary printed after the table."""
        result = runner.invoke(
            cli,
            ["lint", document_path, "--ruleset", "errors-processing-error", "--config", str(config_path)],
        )

        assert result.exit_code == 1
        assert "Error: 5" in result.output

    def test_severity_override_in_config(
        self, runner: CliRunner, document_path: str, config_path: Path
    ) -> None:
        """Test that downgraded rules no longer fail the command."""
        config_path.write_text(yaml.safe_dump({"rules": {FOUR_XX_RULE: "warning"}}))

        result = runner.invoke(
            cli, ["lint", document_path, "--format", "json", "--config", str(config_path)]
        )

        assert result.exit_code == 0
        assert {item["severity"] for item in json.loads(result.output)} == {"warning"}

    def test_fail_severity_option(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test that warnings fail when the threshold is lowered."""
        config_path.write_text(yaml.safe_dump({"rules": {FOUR_XX_RULE: "warning"}}))

        result = runner.invoke(
            cli,
            [
                "lint", document_path,
                "--format", "json",
                "--config", str(config_path),
                "--fail-severity", "warning",
            ],
        )

        assert result.exit_code == 1

    def test_single_rule(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test running only the named rules."""
        result = runner.invoke(
            cli,
            [
                "lint", document_path,
                "--rule", "member-names",
                "--rule", "links-object",
                "--format", "json",
                "--config", str(config_path),
            ],
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_unknown_rule(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test that an unknown rule id is a usage error."""
        result = runner.invoke(
            cli, ["lint", document_path, "--rule", "no-such-rule", "--config", str(config_path)]
        )

        assert result.exit_code == 2
        assert "Unknown rule(s): no-such-rule" in result.output

    def test_missing_document(self, runner: CliRunner, temp_dir: Path, config_path: Path) -> None:
        """Test that an unreadable document exits with 2."""
        result = runner.invoke(
            cli, ["lint", str(temp_dir / "missing.yaml"), "--config", str(config_path)]
        )

        assert result.exit_code == 2
        assert "Error:" in result.output

    def test_invalid_config(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test that a broken configuration exits with 2."""
        config_path.write_text("rules: {member-names: fatal}\n")

        result = runner.invoke(cli, ["lint", document_path, "--config", str(config_path)])

        assert result.exit_code == 2
        assert "Invalid severity" in result.output

    def test_verbose(self, runner: CliRunner, document_path: str, config_path: Path) -> None:
        """Test that verbose mode still lints."""
        result = runner.invoke(
            cli,
            ["-v", "lint", document_path, "--ruleset", "member-names", "--config", str(config_path)],
        )

        assert result.exit_code == 0


class TestRulesCommands:
    """Tests for jsonapi-lint rules."""

    def test_list(self, runner: CliRunner, project_dir: Path) -> None:
        """Test listing every rule."""
        result = runner.invoke(cli, ["rules", "list", "--project-dir", str(project_dir)])

        assert result.exit_code == 0
        assert "82 rule(s)" in result.output

    def test_list_group(self, runner: CliRunner, project_dir: Path) -> None:
        """Test listing one group."""
        result = runner.invoke(
            cli, ["rules", "list", "--ruleset", "member-names", "--project-dir", str(project_dir)]
        )

        assert result.exit_code == 0
        assert "1 rule(s)" in result.output

    def test_show(self, runner: CliRunner, project_dir: Path) -> None:
        """Test showing one rule."""
        result = runner.invoke(cli, ["rules", "show", "member-names", "--project-dir", str(project_dir)])

        assert result.exit_code == 0
        assert "member-names" in result.output
        assert "pattern" in result.output

    def test_show_unknown(self, runner: CliRunner, project_dir: Path) -> None:
        """Test showing a rule that does not exist."""
        result = runner.invoke(cli, ["rules", "show", "nope", "--project-dir", str(project_dir)])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_disable_and_enable(self, runner: CliRunner, project_dir: Path) -> None:
        """Test that toggling a rule is stored in the project configuration."""
        result = runner.invoke(cli, ["rules", "disable", "member-names", "--project-dir", str(project_dir)])

        assert result.exit_code == 0
        assert load_config(find_config(project_dir)).rules == {"member-names": False}

        result = runner.invoke(cli, ["rules", "enable", "member-names", "--project-dir", str(project_dir)])

        assert result.exit_code == 0
        assert load_config(find_config(project_dir)).rules == {"member-names": True}

    def test_enable_keeps_severity(self, runner: CliRunner, project_dir: Path) -> None:
        """Test that enabling a rule keeps its severity override."""
        find_config(project_dir).write_text(yaml.safe_dump({"rules": {"member-names": "warning"}}))

        result = runner.invoke(cli, ["rules", "enable", "member-names", "--project-dir", str(project_dir)])

        assert result.exit_code == 0
        assert load_config(find_config(project_dir)).rules == {"member-names": "warning"}

    def test_disable_unknown(self, runner: CliRunner, project_dir: Path) -> None:
        """Test that an unknown rule is not written to the configuration."""
        result = runner.invoke(cli, ["rules", "disable", "nope", "--project-dir", str(project_dir)])

        assert result.exit_code == 1
        assert not find_config(project_dir).exists()

    def test_export(self, runner: CliRunner, project_dir: Path, temp_dir: Path) -> None:
        """Test that exported rules load back."""
        output = temp_dir / "exported" / "rules.yaml"

        result = runner.invoke(cli, ["rules", "export", str(output), "--project-dir", str(project_dir)])

        assert result.exit_code == 0
        loaded = load_rules_from_yaml(output)
        assert len(loaded) == 82
        assert {rule.id for rule in loaded} >= {FOUR_XX_RULE, "member-names"}

    def test_export_used_as_custom_rules(
        self, runner: CliRunner, project_dir: Path, temp_dir: Path, document_path: str
    ) -> None:
        """Test that an exported file works as another project's custom rules."""
        exported = temp_dir / "exported.yaml"
        runner.invoke(cli, ["rules", "export", str(exported), "--project-dir", str(project_dir)])
        other = temp_dir / "other"
        other.mkdir()
        find_config(other).write_text(yaml.safe_dump({"custom_rules": [str(exported)]}))

        result = runner.invoke(
            cli, ["lint", document_path, "--format", "json", "--config", str(find_config(other))]
        )

        assert result.exit_code == 1
        assert {item["code"] for item in json.loads(result.output)} == {FOUR_XX_RULE}


class TestMalformedCustomRules:
    """Tests for lint with custom rule files that cannot be used."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("- id: listed\n  given: $\n", "Rules must be a mapping"),
            (
                "rules:\n  - id: no-path\n    given: {subpath: .a}\n    then: {function: truthy}\n",
                "Selector needs a JSONPath",
            ),
            (
                "rules:\n  - id: bad-path\n    given: '$.paths[['\n    then: {function: truthy}\n",
                "Invalid JSONPath",
            ),
        ],
    )
    def test_exits_with_2(
        self, runner: CliRunner, document_path: str, config_path: Path, content: str, message: str
    ) -> None:
        """Test that the rules are rejected before the document is linted."""
        (config_path.parent / "extra.yaml").write_text(content)
        config_path.write_text("custom_rules:\n  - extra.yaml\n")

        result = runner.invoke(cli, ["lint", document_path, "--config", str(config_path)])

        assert result.exit_code == 2
        assert message in result.output
