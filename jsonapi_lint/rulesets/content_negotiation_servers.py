"""Content negotiation, server responsibilities."""

from jsonapi_lint.functions import enumeration, truthy
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Then
from jsonapi_lint.rulesets.common import JSONAPI_MEDIA_TYPE

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#content-negotiation-servers"

RULES = [
    Rule(
        id="response-content-type",
        description=(
            "All JSON:API response bodies MUST be returned with the header "
            "Content-Type: application/vnd.api+json"
        ),
        given="$.paths..responses..content",
        then=Then(enumeration, {"values": [JSONAPI_MEDIA_TYPE]}, field=KEY_FIELD),
    ),
    Rule(
        id="415-406-response-codes",
        description=(
            "Servers MUST document and support a 415 and 406 on all paths "
            "in case of invalid media types"
        ),
        given="$.paths..responses",
        then=[
            Then(truthy, field="415"),
            Then(truthy, field="406"),
        ],
    ),
]
