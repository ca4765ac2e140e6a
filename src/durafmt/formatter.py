"""Human readable rendering of durations ("2 weeks 18 hours 22 minutes")."""

from __future__ import annotations

import logging
import re
from datetime import timedelta

from durafmt.duration import MICROSECOND, Duration, parse_duration
from durafmt.errors import MissingUnit
from durafmt.units import Unit

logger = logging.getLogger(__name__)

DurationLike = Duration | int | timedelta

# A single zero term, e.g. "0s" or "-0ms". Names the unit a zero was given in.
_ZERO_TERM = re.compile(r"-?0(?P<code>[a-zµμ]+)")


def _to_duration(value: DurationLike) -> Duration:
    if isinstance(value, Duration):
        return value
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    return Duration.from_ns(value)


def _zero_unit(reference: str) -> Unit | None:
    match = _ZERO_TERM.fullmatch(reference)
    if match is None:
        return None
    return Unit.from_short(match.group("code"))


class DurationFormatter:
    """Formats a duration as a phrase such as "1 day 2 hours 3 minutes".

    Build one with ``from_duration`` or ``from_text`` (or the ``parse*``
    helpers), optionally narrow the output with ``limit_to_unit`` and
    ``limit_first_n``, then call ``render()`` or ``str()``.
    """

    def __init__(self, duration: Duration, reference: str, limit_n: int = 0):
        self._duration = duration
        # Text the duration came from; decides the sign and the zero unit.
        self._reference = reference
        self._zero_unit = _zero_unit(reference)
        self._limit_n = 0
        self._max_unit: Unit | None = None
        self.limit_first_n(limit_n)

    @classmethod
    def from_duration(cls, value: DurationLike) -> DurationFormatter:
        duration = _to_duration(value)
        return cls(duration, str(duration))

    @classmethod
    def from_duration_short(cls, value: DurationLike) -> DurationFormatter:
        """Same as ``from_duration(value).limit_first_n(1)``."""
        return cls.from_duration(value).limit_first_n(1)

    @classmethod
    def from_text(cls, text: str) -> DurationFormatter:
        """Parse compact duration text such as ``354h22m3.24s``.

        Raises:
            MissingUnit: text is a bare zero ("0", "-0").
            InvalidDurationText: text is not a duration.
        """
        if text in ("0", "-0"):
            raise MissingUnit(text)
        duration = Duration.from_ns(parse_duration(text))
        logger.debug(f"Parsed {text!r} as {duration!r}")
        return cls(duration, text)

    @classmethod
    def from_text_short(cls, text: str) -> DurationFormatter:
        """Same as ``from_text(text).limit_first_n(1)``."""
        return cls.from_text(text).limit_first_n(1)

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def reference(self) -> str:
        return self._reference

    @property
    def max_unit(self) -> Unit | None:
        return self._max_unit

    @property
    def limit_n(self) -> int:
        return self._limit_n

    def limit_to_unit(self, unit: Unit | str | None) -> DurationFormatter:
        """Never show a unit bigger than ``unit``; None or "" lifts the limit.

        Larger units fold into ``unit``, so 3 days limited to hours renders as
        "72 hours".
        """
        self._max_unit = Unit.resolve(unit)
        return self

    def limit_first_n(self, n: int) -> DurationFormatter:
        """Only output the first ``n`` unit/value pairs; 0 means no limit."""
        if n < 0:
            raise ValueError(f"Result limit must be >= 0, got {n}")
        self._limit_n = n
        return self

    def components(self) -> list[tuple[Unit, int]]:
        """Break the absolute duration into (unit, count) pairs, largest first.

        Units above the configured maximum unit are reported as 0.
        """
        remaining = abs(self._duration.nanos) // MICROSECOND
        converting = self._max_unit is None
        result = []
        for unit in Unit:
            if unit is self._max_unit:
                converting = True
            if not converting:
                result.append((unit, 0))
                continue
            count, remaining = divmod(remaining, unit.micros)
            result.append((unit, count))
        return result

    def _within_max_unit(self, unit: Unit) -> bool:
        return self._max_unit is None or unit.micros <= self._max_unit.micros

    def render(self) -> str:
        """Render the duration as a human readable phrase.

        May return an empty string when every unit is zero, e.g. for
        durations below one microsecond.
        """
        is_zero = self._duration.is_zero()
        parts = []
        for unit, value in self.components():
            if value > 1:
                parts.append(f"{value} {unit.plural}")
            elif value == 1:
                parts.append(f"{value} {unit.singular}")
            elif is_zero and unit is self._zero_unit and self._within_max_unit(unit):
                parts.append(f"0 {unit.plural}")

        if self._limit_n:
            parts = parts[: self._limit_n]

        text = " ".join(parts)
        if text and self._reference.startswith("-"):
            text = "-" + text
        return text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DurationFormatter({self._reference!r})"


def parse(value: DurationLike) -> DurationFormatter:
    """Create a formatter from a Duration, nanoseconds or a timedelta."""
    return DurationFormatter.from_duration(value)


def parse_short(value: DurationLike) -> DurationFormatter:
    """Shortcut for ``parse(value).limit_first_n(1)``."""
    return DurationFormatter.from_duration_short(value)


def parse_string(text: str) -> DurationFormatter:
    """Create a formatter from text, raising a DurafmtError if it is invalid."""
    return DurationFormatter.from_text(text)


def parse_string_short(text: str) -> DurationFormatter:
    """Shortcut for ``parse_string(text).limit_first_n(1)``."""
    return DurationFormatter.from_text_short(text)
