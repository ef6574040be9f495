"""Selector building blocks shared by the rule groups."""

from __future__ import annotations

from jsonapi_lint.rules.schemas import Selector
from jsonapi_lint.rules.selectors import KeyRange

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

ALL_METHODS = ("get", "delete", "put", "patch", "post")

# Methods whose resource objects always carry a server assigned id
IDENTIFIED_METHODS = ("get", "delete", "put", "patch")

ERROR_STATUS_RANGE = KeyRange("400", "599")


def _names(names: tuple[str, ...]) -> str:
    return ",".join(f"'{name}'" for name in names)


def jsonapi_schema(
    suffix: str = "",
    methods: tuple[str, ...] = ALL_METHODS,
    containers: tuple[str, ...] = ("responses", "requestBody"),
) -> str:
    """Path to the JSON:API media type schemas of operations.

    Args:
        suffix: Continuation below ``schema``, e.g. ".properties.data".
        methods: Operations to include.
        containers: Where the schemas may live below an operation.

    Returns:
        A JSONPath expression.
    """
    return (
        f"$.paths.*[{_names(methods)}]..[{_names(containers)}]"
        f"..content['{JSONAPI_MEDIA_TYPE}'].schema{suffix}"
    )


def response_schema(suffix: str = "") -> str:
    """Path to the JSON:API schema of every documented response."""
    return f"$.paths.*.*.responses.*.content['{JSONAPI_MEDIA_TYPE}'].schema{suffix}"


def error_responses(subpath: str = "") -> Selector:
    """Selector for responses with a 4xx or 5xx status, continued by ``subpath``."""
    return Selector(path="$.paths.*.*.responses.*", key_filter=ERROR_STATUS_RANGE, subpath=subpath)
