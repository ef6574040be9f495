"""Functions available to rules.

Importing this package registers every function under its name so rules
loaded from configuration can refer to them.
"""

from jsonapi_lint.functions.core import enumeration, falsy, is_truthy, length, pattern, schema, truthy
from jsonapi_lint.functions.property_type import validate_property_type
from jsonapi_lint.functions.status_codes import (
    no_multiple_4xx_status_codes,
    no_multiple_5xx_status_codes,
)

__all__ = [
    "enumeration",
    "falsy",
    "is_truthy",
    "length",
    "no_multiple_4xx_status_codes",
    "no_multiple_5xx_status_codes",
    "pattern",
    "schema",
    "truthy",
    "validate_property_type",
]
