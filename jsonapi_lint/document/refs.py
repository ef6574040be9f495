"""Resolution of local ``$ref`` JSON pointers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote

logger = logging.getLogger(__name__)

REF_KEY = "$ref"


class ReferenceResolutionError(ValueError):
    """A local reference points at a location that does not exist."""


def _unescape(token: str) -> str:
    return unquote(token).replace("~1", "/").replace("~0", "~")


def resolve_pointer(document: Any, ref: str) -> Any:
    """Look up a local reference such as ``#/components/schemas/User``.

    Args:
        document: Document the reference belongs to.
        ref: Reference string starting with "#".

    Returns:
        The referenced value.

    Raises:
        ReferenceResolutionError: If the pointer does not resolve.
    """
    if not ref.startswith("#"):
        raise ReferenceResolutionError(f"Not a local reference: {ref}")

    pointer = ref[1:]
    if not pointer:
        return document
    if not pointer.startswith("/"):
        raise ReferenceResolutionError(f"Invalid JSON pointer: {ref}")

    current = document
    for token in pointer[1:].split("/"):
        token = _unescape(token)
        if isinstance(current, Mapping) and token in current:
            current = current[token]
        elif isinstance(current, list) and token.isdigit() and int(token) < len(current):
            current = current[int(token)]
        else:
            raise ReferenceResolutionError(f"Could not resolve reference: {ref}")
    return current


def resolve_refs(document: Any) -> Any:
    """Return a copy of the document with every local reference inlined.

    The input is left untouched. A reference that leads back into itself
    is kept as its ``$ref`` mapping; references to other files are kept
    as they are.

    Raises:
        ReferenceResolutionError: If a local reference does not resolve.
    """
    resolved_count = 0

    def resolve(value: Any, active: tuple[str, ...]) -> Any:
        nonlocal resolved_count
        if isinstance(value, Mapping):
            ref = value.get(REF_KEY)
            if isinstance(ref, str) and ref.startswith("#"):
                if ref in active:
                    logger.debug("Circular reference %s left unresolved", ref)
                    return dict(value)
                resolved_count += 1
                return resolve(resolve_pointer(document, ref), active + (ref,))
            return {key: resolve(item, active) for key, item in value.items()}
        if isinstance(value, list):
            return [resolve(item, active) for item in value]
        return value

    result = resolve(document, ())
    logger.debug("Resolved %d local reference(s)", resolved_count)
    return result
