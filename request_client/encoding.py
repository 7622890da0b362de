"""Query string and form body encoding.

Produces the same output as PHP's ``http_build_query`` with RFC 1738
encoding, which is what form-handling servers written against curl usually
expect:

    >>> build_query({"q": "a b", "page": 2})
    'q=a+b&page=2'
    >>> build_query({"filter": {"tag": ["x", "y"]}, "debug": True})
    'filter%5Btag%5D%5B0%5D=x&filter%5Btag%5D%5B1%5D=y&debug=1'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator
from urllib.parse import quote_plus


def build_query(data: Mapping[str, Any] | None) -> str:
    """Encode a mapping as ``key=value&key2=value2``.

    Args:
        data: Parameters to encode. Nested mappings and sequences are
              flattened to bracketed keys; None values are skipped.

    Returns:
        Encoded string, empty for empty data.
    """
    if not data:
        return ""
    return "&".join(
        f"{name}={quote_plus(value)}" for name, value in _flatten(data, None)
    )


def _flatten(data: Mapping | list | tuple, prefix: str | None) -> Iterator[tuple[str, str | bytes]]:
    """Yield (encoded_name, raw_value) pairs for every leaf value."""
    items = data.items() if isinstance(data, Mapping) else enumerate(data)

    for key, value in items:
        encoded_key = quote_plus(str(key))
        name = encoded_key if prefix is None else f"{prefix}%5B{encoded_key}%5D"

        if value is None:
            continue
        if isinstance(value, (Mapping, list, tuple)):
            yield from _flatten(value, name)
        else:
            yield name, _scalar(value)


def _scalar(value: Any) -> str | bytes:
    """Convert a leaf value to its string form."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, bytes)):
        return value
    return str(value)
