"""Document loading and reference resolution."""

from jsonapi_lint.document.loader import DocumentLoadError, load_document, parse_document
from jsonapi_lint.document.refs import ReferenceResolutionError, resolve_pointer, resolve_refs

__all__ = [
    "DocumentLoadError",
    "ReferenceResolutionError",
    "load_document",
    "parse_document",
    "resolve_pointer",
    "resolve_refs",
]
