"""
Value handling for resolved template expressions.

Resolvers may return anything: strings, numbers, booleans, None, lists,
mappings or arbitrary objects. The executor and scope lookup only ever
touch values through the four functions here.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

_MISSING: Any = object()
_SCALARS: tuple[type, ...] = (str, bytes, bytearray, int, float, type(None))


def is_truthy(value: Any) -> bool:
    """None, False, zero, "" and empty containers are falsy."""
    return bool(value)


def to_display(value: Any) -> str:
    """Convert a resolved value to the text placed in the output.

    None and False render as nothing, True as ``1``.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def as_pairs(value: Any) -> Optional[list[tuple[Any, Any]]]:
    """Return ordered (key, value) pairs for a loop target.

    Mappings keep their own keys in insertion order; other iterables are
    keyed 0..n-1. Strings, bytes and non-iterables give None.
    """
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (str, bytes, bytearray)):
        return None
    if isinstance(value, Iterable):
        return list(enumerate(value))
    return None


def element_get(element: Any, key: str, default: Any = _MISSING) -> Any:
    """Fetch ``key`` from a loop element.

    Mappings are tried with the key as written, then as an integer when it
    is numeric. Sequences are indexed by integer. Other objects fall back
    to attribute access.

    Returns ``default`` when nothing matches; raises LookupError if no
    default was given.
    """
    numeric: Optional[int] = _as_int(key)
    if isinstance(element, Mapping):
        if key in element:
            return element[key]
        if numeric is not None and numeric in element:
            return element[numeric]
    elif isinstance(element, Sequence) and not isinstance(element, (str, bytes)):
        if numeric is not None and -len(element) <= numeric < len(element):
            return element[numeric]
    elif not isinstance(element, _SCALARS) and key.isidentifier():
        attribute: Any = getattr(element, key, _MISSING)
        if attribute is not _MISSING and not callable(attribute):
            return attribute

    if default is _MISSING:
        raise LookupError(key)
    return default


def _as_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except (TypeError, ValueError):
        return None
