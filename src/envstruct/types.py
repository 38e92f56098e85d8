"""
Field types understood by the unmarshaler.

Python collapses Optional[Optional[T]] into Optional[T] and has no fixed-width
numbers, so this module supplies the few types needed to declare what a
configuration field holds:

    - Ref:      an explicit reference box, nestable to any depth
    - Float32 / Float64:  floats parsed at a given precision
    - Int8 .. Int64:      integers range-checked to a given width

These are ordinary int/float subclasses; once set, a field behaves like the
builtin value it wraps.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    """
    A reference to a value (one level of indirection).

    A field declared as Ref[str] is None while its variable is unset and
    Ref("") once the variable is set to the empty string. Refs nest:
    Ref[Ref[str]] becomes Ref(Ref("")).

    Properties:
        value: The referenced value
    """

    value: T


class Float32(float):
    """Single-precision float. Values are rounded to 32 bits when parsed."""


class Float64(float):
    """Double-precision float (same precision as the builtin float)."""


class Int8(int):
    """8-bit signed integer."""


class Int16(int):
    """16-bit signed integer."""


class Int32(int):
    """32-bit signed integer."""


class Int64(int):
    """64-bit signed integer."""


# Inclusive bounds per integer type; a plain int is treated as 64 bits wide.
INT_BOUNDS: Dict[type, Tuple[int, int]] = {
    Int8: (-(2 ** 7), 2 ** 7 - 1),
    Int16: (-(2 ** 15), 2 ** 15 - 1),
    Int32: (-(2 ** 31), 2 ** 31 - 1),
    Int64: (-(2 ** 63), 2 ** 63 - 1),
    int: (-(2 ** 63), 2 ** 63 - 1),
}
