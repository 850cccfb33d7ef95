"""
Query string encoding for Podcast Index requests.
"""

import math
from typing import Any, List, Mapping, Optional, Sequence, Union
from urllib.parse import quote

from .errors import EncodingError

Scalar = Union[bool, int, float, str]
QueryValue = Union[None, Scalar, Sequence[Union[str, int]]]
QueryOptions = Mapping[str, QueryValue]

ARRAY_MARKER = "[]"


def _quote(value: str) -> str:
    # safe="" so that ",", "&" and "=" inside values are always escaped
    return quote(value, safe="")


def _scalar(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"Option '{key}' is not a finite number: {value!r}")
        return repr(value) if value != int(value) else str(int(value))
    raise EncodingError(f"Option '{key}' has unsupported type {type(value).__name__}")


def encode_query(options: QueryOptions) -> str:
    """Encode query options into a query string without the leading '?'.

    ``None``, ``False`` and empty sequences are dropped, ``True`` becomes
    a bare flag and sequences are sent as ``key[]=a,b`` with every element
    escaped on its own, so a comma inside an element arrives as ``%2C``.
    """
    parts: List[str] = []
    for key, value in options.items():
        if value is None or value is False:
            continue
        if isinstance(value, (list, tuple)) and not value:
            continue
        name = _quote(key)
        if value is True:
            parts.append(name)
        elif isinstance(value, (list, tuple)):
            items = []
            for item in value:
                if isinstance(item, bool) or not isinstance(item, (str, int)):
                    raise EncodingError(
                        f"Option '{key}' contains unsupported element {item!r}"
                    )
                items.append(_quote(str(item)))
            parts.append(f"{name}{ARRAY_MARKER}={','.join(items)}")
        else:
            parts.append(f"{name}={_quote(_scalar(key, value))}")
    return "&".join(parts)


def to_array(value: Optional[Union[Scalar, Sequence[Any]]]) -> List[Any]:
    """Normalize an absent, single or many-valued argument to a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
