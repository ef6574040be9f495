"""Document structure, meta information."""

from jsonapi_lint.functions import enumeration
from jsonapi_lint.rules.schemas import Rule, Then

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#document-meta"

RULES = [
    Rule(
        id="meta-object-schema",
        description="The value of each meta member MUST be an object (a “meta object”)",
        given="$..properties.meta",
        then=Then(enumeration, {"values": ["object"]}, field="type"),
    ),
]
