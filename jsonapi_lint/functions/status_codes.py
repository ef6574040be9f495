"""Functions rejecting responses objects that declare several error codes of one class."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from jsonapi_lint.rules.functions import FunctionContext, FunctionResult, ruleset_function

MULTIPLE_4XX_MESSAGE = "Multiple 4xx status codes are not allowed in the same response."
MULTIPLE_5XX_MESSAGE = "Multiple 5xx status codes are not allowed in the same response."


def count_status_class(responses: Any, leading_digit: str) -> int:
    """Count the keys of a responses object starting with ``leading_digit``.

    Args:
        responses: An OpenAPI responses object. Anything that is not a
            mapping has no status codes.
        leading_digit: First character of the status class, e.g. "4".

    Returns:
        Number of matching keys.
    """
    if not isinstance(responses, Mapping):
        return 0
    return sum(1 for status_code in responses if str(status_code).startswith(leading_digit))


def _check_status_class(
    responses: Any, leading_digit: str, message: str, context: FunctionContext
) -> FunctionResult:
    context.logger.debug(
        "Target value at %s: %s", context.path_string, json.dumps(responses, indent=2, default=str)
    )

    count = count_status_class(responses, leading_digit)
    context.logger.debug("Counted %d %sxx status code(s)", count, leading_digit)

    errors: FunctionResult = []
    if count > 1:
        errors.append({"message": message, "path": list(context.path)})

    context.logger.debug("Status code results: %s", errors)
    return errors


@ruleset_function()
def no_multiple_4xx_status_codes(
    target: Any, options: Any, context: FunctionContext
) -> FunctionResult:
    """Report a responses object declaring more than one 4xx status code."""
    return _check_status_class(target, "4", MULTIPLE_4XX_MESSAGE, context)


@ruleset_function()
def no_multiple_5xx_status_codes(
    target: Any, options: Any, context: FunctionContext
) -> FunctionResult:
    """Report a responses object declaring more than one 5xx status code."""
    return _check_status_class(target, "5", MULTIPLE_5XX_MESSAGE, context)
