"""JSONPath evaluation for rule selectors."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from jsonpath_ng import parse
from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.jsonpath import DatumInContext, Fields, Index, JSONPath

from jsonapi_lint.rules.schemas import RulesetError, Selector

logger = logging.getLogger(__name__)

Match = tuple[list[Any], Any]


@lru_cache(maxsize=256)
def compile_path(expression: str) -> JSONPath:
    """Parse a JSONPath expression once and reuse it.

    Raises:
        RulesetError: If the expression is not valid JSONPath.
    """
    try:
        return parse(expression)
    except JSONPathError as e:
        raise RulesetError(f"Invalid JSONPath {expression!r}: {e}") from e


def compile_selector(selector: Selector) -> None:
    """Parse every expression of a selector so bad paths fail before linting."""
    compile_path(selector.path)
    if selector.subpath:
        compile_path("`this`" + selector.subpath)


class KeyRange:
    """Key filter accepting member names within an inclusive string range.

    Comparison is lexicographic, so ``KeyRange("400", "599")`` accepts
    ``"404"`` and ``"4XX"`` but rejects ``"default"``.
    """

    def __init__(self, low: str, high: str) -> None:
        self.low = low
        self.high = high

    def __call__(self, key: str) -> bool:
        return self.low <= str(key) <= self.high

    def __str__(self) -> str:
        return f"?(@property >= '{self.low}' && @property <= '{self.high}')"

    def __repr__(self) -> str:
        return f"KeyRange({self.low!r}, {self.high!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyRange):
            return NotImplemented
        return (self.low, self.high) == (other.low, other.high)

    def __hash__(self) -> int:
        return hash((self.low, self.high))


def match_path(datum: DatumInContext) -> list[Any]:
    """Rebuild the absolute document path of a match from its context chain."""
    segments: list[Any] = []
    current: DatumInContext | None = datum
    while current is not None:
        step = current.path
        if isinstance(step, Fields):
            segments.append(step.fields[0])
        elif isinstance(step, Index):
            indices = getattr(step, "indices", None)
            segments.append(indices[0] if indices else step.index)
        current = current.context
    segments.reverse()
    return segments


def find(selector: Selector | str, document: Any) -> list[Match]:
    """Find every node a selector matches.

    Args:
        selector: Selector or plain JSONPath expression.
        document: Parsed document to search.

    Returns:
        ``(path, value)`` pairs in document order, one per distinct path.
    """
    selector = Selector.coerce(selector)
    data = compile_path(selector.path).find(document)

    if selector.key_filter is not None:
        key_filter = selector.key_filter
        data = [
            datum for datum in data
            if isinstance(datum.path, Fields) and key_filter(datum.path.fields[0])
        ]

    if selector.subpath:
        subpath = compile_path("`this`" + selector.subpath)
        data = [match for datum in data for match in subpath.find(datum)]

    matches: list[Match] = []
    seen: set[tuple[Any, ...]] = set()
    for datum in data:
        path = match_path(datum)
        key = tuple(path)
        if key in seen:
            continue
        seen.add(key)
        matches.append((path, datum.value))

    logger.debug("Selector %s matched %d node(s)", selector, len(matches))
    return matches
