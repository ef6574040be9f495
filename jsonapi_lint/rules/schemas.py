"""Rule system data structures."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Union

if TYPE_CHECKING:
    from jsonapi_lint.rules.functions import RulesetFunction
    from jsonapi_lint.rules.selectors import KeyRange


class RulesetError(ValueError):
    """Base error for problems in rule definitions or their execution."""


class InvalidFunctionOptionsError(RulesetError):
    """Options passed to a function do not match its options schema."""


class DuplicateRuleError(RulesetError):
    """Two rules with the same id were added to one ruleset."""


class UnknownFunctionError(RulesetError):
    """A rule refers to a function name that is not registered."""


class RuleExecutionError(RulesetError):
    """A function raised while a rule was being evaluated."""


class ConfigError(RulesetError):
    """The project configuration file could not be read."""


class _Missing:
    """Value handed to functions when a ``field`` is absent from the target."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

# ``field`` value that targets every member name of the matched mapping
KEY_FIELD = "@key"


class RuleSeverity(Enum):
    """Severity level of a rule violation."""

    ERROR = "error"  # Must be fixed
    WARNING = "warning"  # Should be fixed but not blocking
    INFO = "info"  # Informational, best practice suggestion
    HINT = "hint"

    @classmethod
    def _missing_(cls, value: object) -> RuleSeverity | None:
        aliases: dict[object, RuleSeverity] = {
            "warn": cls.WARNING,
            0: cls.ERROR,
            1: cls.WARNING,
            2: cls.INFO,
            3: cls.HINT,
        }
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            return aliases.get(value)
        return None

    @property
    def rank(self) -> int:
        """Lower is more severe."""
        return list(RuleSeverity).index(self)

    def at_least(self, other: RuleSeverity) -> bool:
        """Check if this severity is as severe as ``other`` or more."""
        return self.rank <= other.rank


@dataclass(frozen=True)
class Selector:
    """A JSONPath expression locating the nodes a rule inspects.

    ``key_filter`` keeps only the matches whose own member name passes the
    filter, and ``subpath`` continues the search relative to each kept match.
    Together they cover selectors that filter on member names, which plain
    JSONPath cannot express.
    """

    path: str
    key_filter: KeyRange | None = None
    subpath: str = ""

    def __str__(self) -> str:
        text = self.path
        if self.key_filter is not None:
            text += f"[{self.key_filter}]"
        return text + self.subpath

    def to_dict(self) -> dict[str, Any]:
        """Convert selector to dictionary."""
        data: dict[str, Any] = {"path": self.path}
        if self.key_filter is not None:
            data["key_range"] = [self.key_filter.low, self.key_filter.high]
        if self.subpath:
            data["subpath"] = self.subpath
        return data

    @classmethod
    def coerce(cls, value: Selector | str | dict[str, Any]) -> Selector:
        """Build a selector from a string, a dictionary, or a selector."""
        if isinstance(value, Selector):
            return value
        if isinstance(value, str):
            return cls(path=value)
        if not isinstance(value, dict) or not isinstance(value.get("path"), str):
            raise ConfigError(f"Selector needs a JSONPath 'path': {value!r}")

        from jsonapi_lint.rules.selectors import KeyRange

        key_filter = None
        if "key_range" in value:
            key_range = value["key_range"]
            if not isinstance(key_range, list) or len(key_range) != 2:
                raise ConfigError(f"Selector key_range must be [low, high]: {key_range!r}")
            key_filter = KeyRange(str(key_range[0]), str(key_range[1]))
        return cls(
            path=value["path"],
            key_filter=key_filter,
            subpath=value.get("subpath", ""),
        )


FieldSpec = Union[str, tuple[Union[str, int], ...], None]


@dataclass
class Then:
    """A single validator invocation within a rule.

    Options are checked against the function's options schema as soon as the
    invocation is built, so a malformed rule fails at load time.
    """

    function: RulesetFunction
    function_options: dict[str, Any] | None = None
    field: FieldSpec = None

    def __post_init__(self) -> None:
        self.function.validate_options(self.function_options)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {"function": self.function.name}
        if self.field is not None:
            data["field"] = self.field if isinstance(self.field, str) else list(self.field)
        if self.function_options is not None:
            data["function_options"] = self.function_options
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Then:
        """Create from dictionary, looking the function up by name."""
        from jsonapi_lint.rules.functions import get_function

        if not isinstance(data, dict):
            raise ConfigError(f"Rule invocation must be a mapping: {data!r}")

        field_value = data.get("field")
        if isinstance(field_value, list):
            field_value = tuple(field_value)
        return cls(
            function=get_function(data.get("function", "")),
            function_options=data.get("function_options"),
            field=field_value,
        )


@dataclass
class Rule:
    """A named check combining one or more selectors with validator invocations.

    ``message`` is a template; ``{{error}}``, ``{{description}}``, ``{{path}}``,
    ``{{property}}`` and ``{{value}}`` are filled in for every result.
    """

    id: str  # Unique identifier, e.g., "links-object"
    description: str
    given: Selector | str | list[Selector | str]
    then: Then | list[Then]
    message: str = "{{path}} - {{description}}"
    severity: RuleSeverity = RuleSeverity.ERROR
    documentation_url: str = ""
    enabled: bool = True
    resolved: bool = True  # Evaluate against the $ref-resolved document

    @property
    def selectors(self) -> list[Selector]:
        """All selectors of the rule."""
        given = self.given if isinstance(self.given, list) else [self.given]
        return [Selector.coerce(item) for item in given]

    @property
    def thens(self) -> list[Then]:
        """All validator invocations of the rule."""
        return self.then if isinstance(self.then, list) else [self.then]

    def to_dict(self) -> dict[str, Any]:
        """Convert rule to dictionary."""
        return {
            "id": self.id,
            "description": self.description,
            "message": self.message,
            "severity": self.severity.value,
            "given": [
                selector.path if selector.key_filter is None and not selector.subpath
                else selector.to_dict()
                for selector in self.selectors
            ],
            "then": [then.to_dict() for then in self.thens],
            "documentation_url": self.documentation_url,
            "enabled": self.enabled,
            "resolved": self.resolved,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rule:
        """Create rule from dictionary."""
        given = data.get("given", [])
        if not isinstance(given, list):
            given = [given]
        then = data.get("then", [])
        if not isinstance(then, list):
            then = [then]
        return cls(
            id=data.get("id", ""),
            description=data.get("description", ""),
            given=[Selector.coerce(item) for item in given],
            then=[Then.from_dict(item) for item in then],
            message=data.get("message", "{{path}} - {{description}}"),
            severity=RuleSeverity(data.get("severity", "error")),
            documentation_url=data.get("documentation_url", ""),
            enabled=data.get("enabled", True),
            resolved=data.get("resolved", True),
        )


@dataclass
class LintResult:
    """A violation reported for one location of the linted document."""

    code: str  # Id of the rule that produced the result
    message: str
    path: list[str | int]
    severity: RuleSeverity = RuleSeverity.ERROR

    @property
    def path_string(self) -> str:
        """Dot-joined document path."""
        return ".".join(str(segment) for segment in self.path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "message": self.message,
            "path": list(self.path),
            "severity": self.severity.value,
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"[{self.severity.value.upper()}] {self.code} at {self.path_string}: {self.message}"


@dataclass
class Ruleset:
    """A named collection of rules keyed by rule id."""

    name: str
    rules: dict[str, Rule] = field(default_factory=dict)
    documentation_url: str = ""

    @classmethod
    def from_rules(
        cls, name: str, rules: list[Rule], documentation_url: str = ""
    ) -> Ruleset:
        """Create a ruleset, rejecting duplicate rule ids."""
        ruleset = cls(name=name, documentation_url=documentation_url)
        for rule in rules:
            ruleset.add(rule)
        return ruleset

    def add(self, rule: Rule, replace: bool = False) -> None:
        """Add a copy of a rule to the ruleset.

        Args:
            rule: Rule to add. The caller's object is left unchanged.
            replace: Let the rule take the place of one with the same id.

        Raises:
            DuplicateRuleError: If the id is taken and ``replace`` is False.
        """
        if rule.id in self.rules and not replace:
            raise DuplicateRuleError(f"Rule '{rule.id}' is already defined in ruleset '{self.name}'")
        rule = copy.copy(rule)
        if not rule.documentation_url:
            rule.documentation_url = self.documentation_url
        self.rules[rule.id] = rule

    def extend(self, other: Ruleset) -> None:
        """Add every rule of another ruleset."""
        for rule in other:
            self.add(rule)

    def get(self, rule_id: str) -> Rule | None:
        """Get a rule by id."""
        return self.rules.get(rule_id)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules.values())

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self.rules
