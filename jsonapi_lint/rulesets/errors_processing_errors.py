"""Errors, processing errors: one error object per response."""

from jsonapi_lint.functions import enumeration, truthy
from jsonapi_lint.rules.schemas import Rule, Then
from jsonapi_lint.rulesets.common import JSONAPI_MEDIA_TYPE, error_responses

DOCUMENTATION_URL = "https://jsonapi.org/format/#error-processing"

ERRORS_ARRAY = error_responses(f".content['{JSONAPI_MEDIA_TYPE}'].schema.properties.errors")

RULES = [
    Rule(
        id="errors-processing-errors-array-max-items",
        description="When multiple problems are encountered one status code needs to be returned",
        given=ERRORS_ARRAY,
        then=Then(truthy, field="maxItems"),
    ),
    Rule(
        id="errors-processing-errors-array-max-items-value",
        description="When multiple problems are encountered one status code needs to be returned",
        given=ERRORS_ARRAY,
        then=Then(enumeration, {"values": [1]}, field="maxItems"),
    ),
]
