"""Function contract shared by every validator a rule can invoke."""

from __future__ import annotations

import functools
import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from jsonschema import Draft7Validator, FormatChecker

from jsonapi_lint.rules.schemas import MISSING, InvalidFunctionOptionsError, UnknownFunctionError

if TYPE_CHECKING:
    from jsonapi_lint.rules.schemas import Rule

logger = logging.getLogger(__name__)

# Partial results returned by a function; the engine fills in code and severity
FunctionResult = list[dict[str, Any]]


def print_value(value: Any) -> str:
    """Render a target value for use in a message."""
    if value is MISSING:
        return "undefined"
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


@dataclass
class FunctionContext:
    """Context handed to a function for one target."""

    path: list[str | int]
    document: Any = None
    rule: Rule | None = None
    logger: logging.Logger = field(default=logger)

    @property
    def path_string(self) -> str:
        """Dot-joined path of the target."""
        return ".".join(str(segment) for segment in self.path)


class RulesetFunction:
    """A validator with declared input and options schemas.

    Options are validated once, when a rule using the function is built.
    Input is checked on every call; values that do not match the input schema
    are skipped rather than reported.
    """

    def __init__(
        self,
        fn: Callable[[Any, Any, FunctionContext], FunctionResult | None],
        input_schema: dict[str, Any] | None = None,
        options_schema: dict[str, Any] | None = None,
        name: str | None = None,
    ) -> None:
        self.fn = fn
        self.name = name or fn.__name__
        self.input_schema = input_schema
        self.options_schema = options_schema
        self._input_validator = (
            Draft7Validator(input_schema) if input_schema is not None else None
        )
        self._options_validator = (
            Draft7Validator(options_schema, format_checker=FormatChecker())
            if options_schema is not None
            else None
        )
        functools.update_wrapper(self, fn)

    def validate_options(self, options: Any) -> None:
        """Raise InvalidFunctionOptionsError if options do not fit the schema."""
        if self._options_validator is None:
            if options:
                raise InvalidFunctionOptionsError(
                    f'"{self.name}" function does not accept any options'
                )
            return

        errors = list(self._options_validator.iter_errors(options))
        if errors:
            details = "; ".join(error.message for error in errors)
            raise InvalidFunctionOptionsError(f'"{self.name}" function has invalid options: {details}')

    def accepts(self, value: Any) -> bool:
        """Check if a target value matches the input schema."""
        if self._input_validator is None:
            return True
        if value is MISSING:
            return False
        return self._input_validator.is_valid(value)

    def __call__(self, value: Any, options: Any, context: FunctionContext) -> FunctionResult | None:
        if not self.accepts(value):
            context.logger.debug("%s skipped input at %s", self.name, context.path_string)
            return None
        return self.fn(value, options, context)

    def __repr__(self) -> str:
        return f"RulesetFunction({self.name!r})"


# Registry of functions available to rules loaded from configuration
FUNCTIONS: dict[str, RulesetFunction] = {}


def ruleset_function(
    input_schema: dict[str, Any] | None = None,
    options_schema: dict[str, Any] | None = None,
) -> Callable[[Callable[..., FunctionResult | None]], RulesetFunction]:
    """Declare a function with its input and options schemas and register it."""

    def decorator(fn: Callable[..., FunctionResult | None]) -> RulesetFunction:
        function = RulesetFunction(fn, input_schema=input_schema, options_schema=options_schema)
        FUNCTIONS[function.name] = function
        return function

    return decorator


def get_function(name: str) -> RulesetFunction:
    """Get a registered function by name.

    Args:
        name: Name of the function, e.g. "truthy".

    Returns:
        The registered function.

    Raises:
        UnknownFunctionError: If no function has that name.
    """
    # Registration happens on import of the function modules
    import jsonapi_lint.functions  # noqa: F401

    if name not in FUNCTIONS:
        raise UnknownFunctionError(
            f"Unknown function: {name}. Available: {sorted(FUNCTIONS)}"
        )
    return FUNCTIONS[name]
