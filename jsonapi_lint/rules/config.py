"""Project configuration stored in ``.jsonapi-lint.yaml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from jsonapi_lint.rules.schemas import ConfigError, RuleSeverity

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".jsonapi-lint.yaml"


@dataclass
class LintConfig:
    """Settings controlling which rules run and how results are judged."""

    rulesets: list[str] = field(default_factory=list)  # Empty means every group
    rules: dict[str, bool | str] = field(default_factory=dict)  # Per-rule overrides
    custom_rules: list[str] = field(default_factory=list)  # YAML rule files
    resolve_refs: bool = True
    fail_severity: RuleSeverity = RuleSeverity.ERROR
    base_dir: Path = field(default_factory=Path, compare=False)  # Directory of the config file

    @property
    def custom_rule_paths(self) -> list[Path]:
        """Custom rule files, relative paths taken from the config directory."""
        return [self.base_dir / path for path in self.custom_rules]

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        data: dict[str, Any] = {}
        if self.rulesets:
            data["rulesets"] = list(self.rulesets)
        if self.rules:
            data["rules"] = dict(self.rules)
        if self.custom_rules:
            data["custom_rules"] = list(self.custom_rules)
        data["resolve_refs"] = self.resolve_refs
        data["fail_severity"] = self.fail_severity.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> LintConfig:
        """Create configuration from dictionary.

        Args:
            data: Parsed configuration.
            base_dir: Directory that relative ``custom_rules`` paths start from.

        Raises:
            ConfigError: If a value has the wrong shape.
        """
        rules = data.get("rules") or {}
        if not isinstance(rules, dict):
            raise ConfigError("'rules' must be a mapping of rule ids to settings")

        try:
            fail_severity = RuleSeverity(data.get("fail_severity", "error"))
        except ValueError as e:
            raise ConfigError(f"Invalid fail_severity: {data.get('fail_severity')!r}") from e

        return cls(
            rulesets=list(data.get("rulesets") or []),
            rules={str(rule_id): setting for rule_id, setting in rules.items()},
            custom_rules=[str(path) for path in data.get("custom_rules") or []],
            resolve_refs=bool(data.get("resolve_refs", True)),
            fail_severity=fail_severity,
            base_dir=base_dir or Path(),
        )


def find_config(project_dir: Path | str = ".") -> Path:
    """Get the configuration path for a project directory."""
    return Path(project_dir) / CONFIG_FILENAME


def load_config(path: Path | str) -> LintConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        The configuration; defaults if the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No configuration at %s, using defaults", path)
        return LintConfig()

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Could not load configuration from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")

    return LintConfig.from_dict(data, base_dir=path.parent)


def save_config(config: LintConfig, path: Path | str) -> None:
    """Save configuration to a YAML file.

    Args:
        config: Configuration to save.
        path: Path to the configuration file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False))
