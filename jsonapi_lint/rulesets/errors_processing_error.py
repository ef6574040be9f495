"""Errors, processing: a single general status code for multiple problems."""

from jsonapi_lint.functions import no_multiple_4xx_status_codes, no_multiple_5xx_status_codes
from jsonapi_lint.rules.schemas import Rule, Then

DOCUMENTATION_URL = "https://jsonapi.org/format/#errors-processing"

RULES = [
    Rule(
        id="errors-processing-errors-no-multiple-4xx-codes",
        description="Responses should not contain multiple 4XX status codes",
        given="$.paths.*.*.responses",
        then=Then(no_multiple_4xx_status_codes),
    ),
    Rule(
        id="errors-processing-errors-no-multiple-5xx-codes",
        description="Responses should not contain multiple 5XX status codes",
        given="$.paths.*.*.responses",
        then=Then(no_multiple_5xx_status_codes),
    ),
]
