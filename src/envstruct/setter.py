"""
Value coercion: raw environment string -> typed field value.

coerce() is pure. It builds the complete new value (unwrapping any number
of Optional/Ref layers on the way) and the walker assigns it only once
coercion has succeeded, so a failed parse never leaves a half-built Ref
attached to a field.
"""

from __future__ import annotations

import math
import re
import struct
import types
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Union, get_args, get_origin

from envstruct.duration import parse_duration
from envstruct.errors import CoercionError, UnsupportedTypeError
from envstruct.types import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    INT_BOUNDS,
    Ref,
)

_TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_LITERALS = {"0", "f", "F", "FALSE", "false", "False"}

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?|inf|infinity|nan)", re.IGNORECASE
)


def parse_bool(value: str) -> bool:
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal {value!r}")


def _parse_float64(value: str) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError(f"invalid float literal {value!r}")
    result = float(value)
    if math.isinf(result) and "inf" not in value.lower():
        raise OverflowError(f"{value!r} is out of range for a 64-bit float")
    return result


def _parse_float32(value: str) -> float:
    wide = _parse_float64(value)
    # struct raises OverflowError for finite values beyond single precision
    return struct.unpack("f", struct.pack("f", wide))[0]


def _int_parser(tp: type) -> Callable[[str], int]:
    low, high = INT_BOUNDS[tp]

    def parse(value: str) -> int:
        if not _INT_RE.fullmatch(value):
            raise ValueError(f"invalid integer literal {value!r}")
        result = int(value)
        if not low <= result <= high:
            raise OverflowError(f"{value!r} is out of range [{low}, {high}]")
        return result

    return parse


# Exact-type lookup: bool is an int subclass and must not fall into int.
_PARSERS: Dict[type, Callable[[str], Any]] = {
    str: str,
    bool: parse_bool,
    float: _parse_float64,
    Float64: _parse_float64,
    Float32: _parse_float32,
    int: _int_parser(int),
    Int8: _int_parser(Int8),
    Int16: _int_parser(Int16),
    Int32: _int_parser(Int32),
    Int64: _int_parser(Int64),
    timedelta: parse_duration,
}


def optional_inner(tp: Any) -> Optional[Any]:
    """
    Return T for Optional[T] / T | None, otherwise None.

    Unions with more than one non-None member are not optionals.
    """
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        members = [a for a in get_args(tp) if a is not type(None)]
        if len(members) == 1 and len(get_args(tp)) == 2:
            return members[0]
    return None


def ref_inner(tp: Any) -> Optional[Any]:
    """Return T for Ref[T], otherwise None. A bare Ref is Ref[str]."""
    if tp is Ref:
        return str
    if get_origin(tp) is Ref:
        return get_args(tp)[0]
    return None


def coerce(tp: Any, value: str, field_name: Optional[str] = None) -> Any:
    """
    Convert a raw string into a value of type tp.

    Args:
        tp: Declared field type
        value: Raw string (from the environment or a default literal)
        field_name: Used only for error context

    Returns:
        The new field value. For Optional[T] this is the T value; for
        Ref[T] it is a fresh Ref holding the coerced T.

    Raises:
        UnsupportedTypeError: If tp has no coercion rule
        CoercionError: If value does not parse as tp
    """
    inner = optional_inner(tp)
    if inner is not None:
        return coerce(inner, value, field_name)

    inner = ref_inner(tp)
    if inner is not None:
        return Ref(coerce(inner, value, field_name))

    parser = _PARSERS.get(tp) if isinstance(tp, type) else None
    if parser is None:
        raise UnsupportedTypeError(field_name, tp)

    try:
        result = parser(value)
    except (ValueError, OverflowError) as e:
        raise CoercionError(field_name, tp, value, str(e)) from e

    # Keep width-specific types visible on the stored value
    if tp in (Float32, Float64, Int8, Int16, Int32, Int64):
        return tp(result)
    return result
