"""JSON encoding and decoding with script-table semantics.

Tables are dicts or lists. A table whose keys are 1..n encodes as an
array, one with string keys as an object; an empty table is an array.
Decoded numbers are always floats.
"""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Any

_NEGATIVE_EXPONENT = re.compile(r"e-0(\d)$")

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class JSONEncodeError(ValueError):
    """Raised when a value cannot be encoded to JSON."""


_ERR_NESTED = "cannot encode recursively nested tables to JSON"
_ERR_SPARSE = "cannot encode sparse array"
_ERR_KEYS = "cannot encode mixed or invalid key types"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise JSONEncodeError(f"json: unsupported value: {value!r}")
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    magnitude = abs(value)
    if 1e-6 <= magnitude < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return _NEGATIVE_EXPONENT.sub(r"e-\1", repr(value))


def _format_string(value: str) -> str:
    text = json.dumps(value, ensure_ascii=False)
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def _type_name(value: Any) -> str:
    if callable(value):
        return "function"
    return type(value).__name__


def _encode(value: Any, visited: set[int]) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _format_number(float(value))
    if isinstance(value, str):
        return _format_string(value)
    if isinstance(value, (list, tuple)):
        if id(value) in visited:
            raise JSONEncodeError(_ERR_NESTED)
        visited.add(id(value))
        return "[" + ",".join(_encode(item, visited) for item in value) + "]"
    if isinstance(value, dict):
        if id(value) in visited:
            raise JSONEncodeError(_ERR_NESTED)
        visited.add(id(value))
        return _encode_table(value, visited)
    raise JSONEncodeError(f"cannot encode {_type_name(value)} to JSON")


def _encode_table(table: dict, visited: set[int]) -> str:
    if not table:
        return "[]"
    keys = list(table)
    if all(_is_number(key) for key in keys):
        ordered = sorted(keys)
        for expected, key in enumerate(ordered, start=1):
            if key != expected:
                raise JSONEncodeError(_ERR_SPARSE)
        return "[" + ",".join(_encode(table[key], visited) for key in ordered) + "]"
    if all(isinstance(key, str) for key in keys):
        members = (
            _format_string(key) + ":" + _encode(table[key], visited) for key in sorted(keys)
        )
        return "{" + ",".join(members) + "}"
    raise JSONEncodeError(_ERR_KEYS)


def encode(value: Any) -> str:
    """Return the compact JSON text of value.

    Raises JSONEncodeError for recursive or shared tables, sparse arrays,
    mixed keys and values of unsupported types.
    """
    return _encode(value, set())


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def decode(data: str | bytes) -> Any:
    """Parse JSON text; numbers become floats, null becomes None.

    Raises ValueError on malformed input.
    """
    return json.loads(data, parse_int=float, parse_constant=_reject_constant)