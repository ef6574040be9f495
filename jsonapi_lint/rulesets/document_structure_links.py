"""Document structure, links objects."""

from jsonapi_lint.functions import enumeration
from jsonapi_lint.rules.schemas import KEY_FIELD, Rule, Then

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#document-links"

RULES = [
    Rule(
        id="links-object",
        description="The value of each links member MUST be an object (a “links object”)",
        given="$..properties.links",
        then=Then(enumeration, {"values": ["object"]}, field="type"),
    ),
    Rule(
        id="links-object-schema-type",
        description=(
            "A link must be represented as either a string containing the link's URL "
            "or an object"
        ),
        given="$..properties.links.properties.*",
        then=Then(enumeration, {"values": ["object", "string"]}, field="type"),
    ),
    Rule(
        id="links-object-schema-properties",
        description=(
            "An object (“link object”) which can contain the following members "
            "(href and meta)"
        ),
        given="$..properties.links.properties..properties",
        then=Then(enumeration, {"values": ["href", "meta"]}, field=KEY_FIELD),
    ),
    Rule(
        id="links-object-schema-properties-href",
        description="href is a string containing the link's URL",
        given="$..properties.links.properties..properties.href",
        then=Then(enumeration, {"values": ["string"]}, field="type"),
    ),
]
