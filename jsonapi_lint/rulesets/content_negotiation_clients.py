"""Content negotiation, client responsibilities."""

from jsonapi_lint.functions import enumeration
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Then
from jsonapi_lint.rulesets.common import JSONAPI_MEDIA_TYPE

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#content-negotiation-clients"

RULES = [
    Rule(
        id="request-content-type",
        description=(
            "All JSON:API request bodies MUST be received with the header "
            "Content-Type: application/vnd.api+json"
        ),
        given="$.paths..requestBody.content",
        then=Then(enumeration, {"values": [JSONAPI_MEDIA_TYPE]}, field=KEY_FIELD),
    ),
]
