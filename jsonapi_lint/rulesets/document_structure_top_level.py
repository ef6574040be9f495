"""Document structure, top level members."""

from jsonapi_lint.functions import enumeration, falsy, truthy
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Then
from jsonapi_lint.rulesets.common import JSONAPI_MEDIA_TYPE

DOCUMENTATION_URL = "https://jsonapi.org/format/#document-top-level"

TOP_LEVEL_MEMBERS = ["data", "meta", "errors", "links", "included", "jsonapi"]

_SCHEMA = f"$.paths..content['{JSONAPI_MEDIA_TYPE}'].schema"

RULES = [
    Rule(
        id="top-level-json-object",
        description=(
            "A JSON object MUST be at the root of every JSON:API request/response "
            "body containing data."
        ),
        given=_SCHEMA,
        then=Then(enumeration, {"values": ["object"]}, field="type"),
    ),
    Rule(
        id="top-level-json-properties",
        description="Must follow top level JSON:API document properties.",
        given=f"{_SCHEMA}.properties",
        then=Then(enumeration, {"values": TOP_LEVEL_MEMBERS}, field=KEY_FIELD),
    ),
    Rule(
        id="top-level-json-properties-included",
        description="'data' property must exist if included is returned",
        given=f"{_SCHEMA}.properties.included.`parent`",
        then=Then(truthy, field="data"),
    ),
    Rule(
        id="top-level-json-properties-errors",
        description="'data' property must not exist if errors is returned",
        given=f"{_SCHEMA}.properties.errors.`parent`",
        then=Then(falsy, field="data"),
    ),
]
