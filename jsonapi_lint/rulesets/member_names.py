"""Document structure, member names used as query parameters."""

from jsonapi_lint.functions import pattern
from jsonapi_lint.rules.schemas import Rule, Then

DOCUMENTATION_URL = "https://jsonapi.org/format/1.0/#document-member-names"

# A member name starts and ends with an alphanumeric character and may
# contain hyphens and underscores in between. Family parameters such as
# page[number] nest member names in brackets.
_MEMBER_NAME = r"[a-zA-Z0-9](?:[a-zA-Z0-9_-]*[a-zA-Z0-9])?"
MEMBER_NAME_PATTERN = rf"^{_MEMBER_NAME}(?:\[{_MEMBER_NAME}\])*$"

RULES = [
    Rule(
        id="member-names",
        description=(
            "Implementation specific query parameters MUST adhere to the same "
            "constraints as member names along with additional requirements."
        ),
        given="$.paths.*.get.parameters[*].name",
        then=Then(pattern, {"match": MEMBER_NAME_PATTERN}),
    ),
]
