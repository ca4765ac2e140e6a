"""Duration type with nanosecond precision and compact text form (``1h2m3.5s``)."""

from __future__ import annotations

import logging
import re
from datetime import timedelta
from typing import Final

from pydantic import BaseModel, Field

from durafmt.errors import InvalidDurationText

logger = logging.getLogger(__name__)

MIN_NANOS: Final[int] = -(1 << 63)
MAX_NANOS: Final[int] = (1 << 63) - 1

NANOSECOND: Final[int] = 1
MICROSECOND: Final[int] = 1_000 * NANOSECOND
MILLISECOND: Final[int] = 1_000 * MICROSECOND
SECOND: Final[int] = 1_000 * MILLISECOND
MINUTE: Final[int] = 60 * SECOND
HOUR: Final[int] = 60 * MINUTE

_UNIT_TO_NANOS: Final[dict[str, int]] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}
_TERM_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)"
)
_MAX_WHOLE_DIGITS: Final[int] = len(str(-MIN_NANOS))
_MAX_FRACTION_DIGITS: Final[int] = 21


def parse_duration(text: str) -> int:
    """Return the signed nanoseconds represented by a compact duration string.

    The text is an optional sign followed by one or more ``<number><unit>``
    terms, where the number may carry a decimal fraction and the unit is one
    of ns, us (or µs), ms, s, m, h. A bare ``0`` is accepted as zero.

    Examples:
        >>> parse_duration("1h30m")
        5400000000000
        >>> parse_duration("-1.5s")
        -1500000000
        >>> parse_duration("2ms300us")
        2300000
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return 0
    if not rest:
        raise _invalid(text)

    total = 0
    pos = 0
    while pos < len(rest):
        match = _TERM_PATTERN.match(rest, pos)
        whole, frac, unit = match.group("whole", "frac", "unit")
        if not whole and not frac:
            raise _invalid(text)
        if not unit:
            raise _invalid(text, "missing unit in duration")
        scale = _UNIT_TO_NANOS.get(unit)
        if scale is None:
            raise _invalid(text, f"unknown unit {unit!r} in duration")

        whole = whole.lstrip("0")
        if len(whole) > _MAX_WHOLE_DIGITS:
            raise _invalid(text)
        total += int(whole or "0") * scale
        if frac:
            # Digits past the 21st are far below a nanosecond; drop them.
            frac = frac[:_MAX_FRACTION_DIGITS]
            total += int(frac) * scale // 10 ** len(frac)
        pos = match.end()

    if total > (-MIN_NANOS if negative else MAX_NANOS):
        raise _invalid(text)
    return -total if negative else total


def _invalid(text: str, reason: str = "invalid duration") -> InvalidDurationText:
    logger.debug(f"Rejected duration text {text!r}: {reason}")
    return InvalidDurationText(text, reason)


def _split_fraction(value: int, precision: int) -> tuple[int, str]:
    """Split value / 10**precision into its integer part and a ".ddd" suffix.

    Trailing zeros are dropped, and the suffix is empty when there is no
    fraction at all.
    """
    whole, frac = divmod(value, 10**precision)
    digits = f"{frac:0{precision}d}".rstrip("0")
    return whole, f".{digits}" if digits else ""


def format_duration(nanos: int) -> str:
    """Render nanoseconds in the canonical compact form.

    Examples:
        >>> format_duration(0)
        '0s'
        >>> format_duration(1_500)
        '1.5µs'
        >>> format_duration(3_600 * SECOND)
        '1h0m0s'
        >>> format_duration(-(2 * MINUTE + 3_240 * MILLISECOND))
        '-2m3.24s'
    """
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    magnitude = abs(nanos)

    if magnitude < SECOND:
        if magnitude < MICROSECOND:
            return f"{sign}{magnitude}ns"
        if magnitude < MILLISECOND:
            whole, frac = _split_fraction(magnitude, 3)
            return f"{sign}{whole}{frac}µs"
        whole, frac = _split_fraction(magnitude, 6)
        return f"{sign}{whole}{frac}ms"

    seconds, frac = _split_fraction(magnitude, 9)
    minutes, seconds = divmod(seconds, 60)
    text = f"{seconds}{frac}s"
    if minutes:
        hours, minutes = divmod(minutes, 60)
        text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return sign + text


class Duration(BaseModel):
    """Signed duration with nanosecond precision.

    Core representation is int nanoseconds, bounded to the signed 64-bit
    range, to avoid float precision issues.
    """

    model_config = {"frozen": True}

    nanos: int = Field(ge=MIN_NANOS, le=MAX_NANOS, description="Duration in nanoseconds")

    @classmethod
    def from_ns(cls, nanos: int) -> Duration:
        """Create duration from nanoseconds."""
        return cls(nanos=nanos)

    @classmethod
    def from_us(cls, micros: int | float) -> Duration:
        """Create duration from microseconds."""
        return cls(nanos=int(micros * MICROSECOND))

    @classmethod
    def from_ms(cls, millis: int | float) -> Duration:
        """Create duration from milliseconds."""
        return cls(nanos=int(millis * MILLISECOND))

    @classmethod
    def from_sec(cls, seconds: int | float) -> Duration:
        """Create duration from seconds."""
        return cls(nanos=int(seconds * SECOND))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        seconds = delta.days * 86_400 + delta.seconds
        return cls(nanos=seconds * SECOND + delta.microseconds * MICROSECOND)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Create duration from compact text such as ``1h2m3.5s``."""
        return cls(nanos=parse_duration(text))

    @classmethod
    def zero(cls) -> Duration:
        return cls(nanos=0)

    def as_ns(self) -> int:
        return self.nanos

    def as_us(self) -> float:
        return self.nanos / MICROSECOND

    def as_ms(self) -> float:
        return self.nanos / MILLISECOND

    def as_sec(self) -> float:
        return self.nanos / SECOND

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below one microsecond."""
        micros = abs(self.nanos) // MICROSECOND
        return timedelta(microseconds=-micros if self.nanos < 0 else micros)

    def is_zero(self) -> bool:
        return self.nanos == 0

    def is_negative(self) -> bool:
        return self.nanos < 0

    def __add__(self, other: Duration) -> Duration:
        return Duration(nanos=self.nanos + other.nanos)

    def __sub__(self, other: Duration) -> Duration:
        return Duration(nanos=self.nanos - other.nanos)

    def __neg__(self) -> Duration:
        return Duration(nanos=-self.nanos)

    def __abs__(self) -> Duration:
        return Duration(nanos=abs(self.nanos))

    def __mul__(self, scalar: int | float) -> Duration:
        return Duration(nanos=int(self.nanos * scalar))

    def __rmul__(self, scalar: int | float) -> Duration:
        return self * scalar

    def __lt__(self, other: Duration) -> bool:
        return self.nanos < other.nanos

    def __le__(self, other: Duration) -> bool:
        return self.nanos <= other.nanos

    def __gt__(self, other: Duration) -> bool:
        return self.nanos > other.nanos

    def __ge__(self, other: Duration) -> bool:
        return self.nanos >= other.nanos

    def __str__(self) -> str:
        return format_duration(self.nanos)

    def __repr__(self) -> str:
        return f"Duration({self.nanos}ns)"
