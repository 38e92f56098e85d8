"""
Duration literals.

Grammar:

    [-+]? ( number unit )+      or the bare literal "0"

    number = digits [ "." digits ]   (digits on at least one side of the dot)
    unit   = ns | us | µs | μs | ms | s | m | h

Examples: "5s", "100ms", "1h30m", "-1.5h", "2h45m10.5s".

Durations are held as datetime.timedelta, so anything finer than a
microsecond is truncated toward zero.
"""

import re
from datetime import timedelta
from typing import Dict

_UNIT_NS: Dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

_MAX_NS = 2 ** 63 - 1


def parse_duration(s: str) -> timedelta:
    """
    Parse a duration literal into a timedelta.

    Raises:
        ValueError: If the literal does not match the grammar or overflows
    """
    original = s
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return timedelta(0)
    if s == "":
        raise ValueError(f"invalid duration {original!r}")

    total_ns = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT_RE.match(s, pos)
        whole, frac, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not frac:
            raise ValueError(f"invalid duration {original!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {original!r}")
        if unit not in _UNIT_NS:
            raise ValueError(f"unknown unit {unit!r} in duration {original!r}")

        scale = _UNIT_NS[unit]
        total_ns += int(whole or "0") * scale
        if frac:
            total_ns += int(frac) * scale // 10 ** len(frac)
        if total_ns > _MAX_NS + (1 if negative else 0):
            raise ValueError(f"invalid duration {original!r}: out of range")
        pos = match.end()

    micros = total_ns // 1_000
    return timedelta(microseconds=-micros if negative else micros)


def _format_fraction(value: int, precision: int) -> str:
    whole, frac = divmod(value, 10 ** precision)
    digits = f"{frac:0{precision}d}".rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration(td: timedelta) -> str:
    """
    Render a timedelta as a duration literal that parse_duration accepts.

    Examples: "0s", "250ms", "1.5s", "1m30s", "1h0m0s".
    """
    ns = (td // timedelta(microseconds=1)) * 1_000
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _UNIT_NS["s"]:
        if ns < _UNIT_NS["us"]:
            return f"{sign}{ns}ns"
        if ns < _UNIT_NS["ms"]:
            return f"{sign}{_format_fraction(ns, 3)}µs"
        return f"{sign}{_format_fraction(ns, 6)}ms"

    minutes, rem_ns = divmod(ns, _UNIT_NS["m"])
    out = _format_fraction(rem_ns, 9) + "s"
    if minutes:
        hours, minutes = divmod(minutes, 60)
        out = f"{minutes}m" + out
        if hours:
            out = f"{hours}h" + out
    return sign + out
