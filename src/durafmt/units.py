"""Fixed table of units used when breaking a duration down."""

from __future__ import annotations

from enum import Enum

from durafmt.errors import UnknownUnit

US_PER_MILLISECOND = 1_000
US_PER_SECOND = 1_000 * US_PER_MILLISECOND
US_PER_MINUTE = 60 * US_PER_SECOND
US_PER_HOUR = 60 * US_PER_MINUTE
US_PER_DAY = 24 * US_PER_HOUR
US_PER_WEEK = 7 * US_PER_DAY
US_PER_YEAR = 365 * US_PER_DAY  # no calendar awareness


class Unit(str, Enum):
    """Output units, largest first. Values are the literal output names."""

    YEARS = "years"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"

    def __str__(self) -> str:
        return self.value

    @property
    def plural(self) -> str:
        return self.value

    @property
    def singular(self) -> str:
        """Output name with the trailing plural marker removed."""
        return self.value.removesuffix("s")

    @property
    def short(self) -> str:
        return _SHORT_CODES[self]

    @property
    def micros(self) -> int:
        """Length of one unit in microseconds."""
        return _MICROS[self]

    @classmethod
    def from_short(cls, code: str) -> Unit | None:
        """Look up a unit by short code (``h``, ``ms``...), None if unknown.

        Both micro signs (``µs`` and ``μs``) are accepted for ``us``.
        """
        return _BY_SHORT.get(code.replace("µ", "u").replace("μ", "u"))

    @classmethod
    def resolve(cls, value: Unit | str | None) -> Unit | None:
        """Turn a unit, unit name or short code into a Unit.

        None and the empty string mean "no unit". Anything else that does
        not name a unit raises UnknownUnit.
        """
        if value is None or value == "":
            return None
        if isinstance(value, Unit):
            return value
        name = value.strip().lower()
        for unit in cls:
            if name in (unit.plural, unit.singular):
                return unit
        unit = cls.from_short(name)
        if unit is None:
            raise UnknownUnit(value)
        return unit


_SHORT_CODES: dict[Unit, str] = {
    Unit.YEARS: "y",
    Unit.WEEKS: "w",
    Unit.DAYS: "d",
    Unit.HOURS: "h",
    Unit.MINUTES: "m",
    Unit.SECONDS: "s",
    Unit.MILLISECONDS: "ms",
    Unit.MICROSECONDS: "us",
}

_MICROS: dict[Unit, int] = {
    Unit.YEARS: US_PER_YEAR,
    Unit.WEEKS: US_PER_WEEK,
    Unit.DAYS: US_PER_DAY,
    Unit.HOURS: US_PER_HOUR,
    Unit.MINUTES: US_PER_MINUTE,
    Unit.SECONDS: US_PER_SECOND,
    Unit.MILLISECONDS: US_PER_MILLISECOND,
    Unit.MICROSECONDS: 1,
}

_BY_SHORT: dict[str, Unit] = {code: unit for unit, code in _SHORT_CODES.items()}


def check_unit_table(
    short_codes: dict[Unit, str] = _SHORT_CODES, micros: dict[Unit, int] = _MICROS
) -> None:
    """Raise RuntimeError if the unit tables disagree with the Unit enum."""
    units = list(Unit)
    missing = [u for u in units if u not in short_codes or u not in micros]
    if missing:
        raise RuntimeError(f"Unit table incomplete for: {', '.join(map(str, missing))}")

    if len(set(short_codes.values())) != len(short_codes):
        raise RuntimeError("Unit short codes must be unique")

    factors = [micros[u] for u in units]
    if any(larger <= smaller for larger, smaller in zip(factors, factors[1:])):
        raise RuntimeError("Unit factors must be strictly descending")
    if factors[-1] != 1:
        raise RuntimeError("Smallest unit must be one microsecond")


check_unit_table()
