import re
from datetime import timedelta
from decimal import Decimal

from flagutil.domain.errors import InvalidDurationError

# nanoseconds per unit
_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # MICRO SIGN
    "μs": 1_000,  # GREEK SMALL LETTER MU
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000
_MAX_NS = 2**63 - 1


def parse_duration(raw: str) -> timedelta:
    """Parse a duration string such as "300ms", "-1.5h" or "2h45m".

    A duration is an optionally signed sequence of decimal numbers, each with
    an optional fraction and a unit suffix. Valid units are "ns", "us" (or
    "µs"), "ms", "s", "m" and "h". Sub-microsecond parts are truncated and
    anything beyond 2**63-1 nanoseconds (about 292 years) is rejected.
    """
    s = raw
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise InvalidDurationError(raw, "invalid duration")

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        m = _COMPONENT.match(s, pos)
        whole, frac, unit = m.group("whole"), m.group("frac"), m.group("unit")
        if not whole and not frac:
            # no digits at all, e.g. ".s" or "s"
            raise InvalidDurationError(raw, "invalid duration")
        if not unit:
            raise InvalidDurationError(raw, "missing unit")
        if unit not in _UNITS:
            raise InvalidDurationError(raw, f'unknown unit "{unit}"')
        total += Decimal(f"{whole or 0}.{frac or 0}") * _UNITS[unit]
        pos = m.end()

    # range of a signed 64-bit nanosecond count
    if total > (_MAX_NS + 1 if negative else _MAX_NS):
        raise InvalidDurationError(raw, "invalid duration")

    micros = int(total) // _NS_PER_US
    return timedelta(microseconds=-micros if negative else micros)


def _trim(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = str(frac).rjust(len(str(unit)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"


def format_duration(value: timedelta) -> str:
    """Render a timedelta the way parse_duration reads it, e.g. "1h2m3.5s"."""
    ns = ((value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds) * _NS_PER_US
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _NS_PER_S:
        if ns < _NS_PER_MS:
            return f"{sign}{_trim(ns, _NS_PER_US)}µs"
        return f"{sign}{_trim(ns, _NS_PER_MS)}ms"

    hours, rest = divmod(ns, 3600 * _NS_PER_S)
    minutes, rest = divmod(rest, 60 * _NS_PER_S)
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return out + f"{_trim(rest, _NS_PER_S)}s"
