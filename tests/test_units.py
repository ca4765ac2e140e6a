"""Tests for the unit table."""

import pytest

from durafmt.errors import UnknownUnit
from durafmt.units import US_PER_HOUR, US_PER_SECOND, Unit, check_unit_table


def test_unit_order():
    """Test that units are listed largest first."""
    assert [u.value for u in Unit] == [
        "years",
        "weeks",
        "days",
        "hours",
        "minutes",
        "seconds",
        "milliseconds",
        "microseconds",
    ]
    factors = [u.micros for u in Unit]
    assert factors == sorted(factors, reverse=True)


def test_unit_factors():
    """Test conversion factors in microseconds."""
    assert Unit.YEARS.micros == 365 * 24 * 3600 * 1_000_000
    assert Unit.WEEKS.micros == 7 * 24 * 3600 * 1_000_000
    assert Unit.DAYS.micros == 24 * 3600 * 1_000_000
    assert Unit.HOURS.micros == 3600 * 1_000_000
    assert Unit.MINUTES.micros == 60 * 1_000_000
    assert Unit.SECONDS.micros == 1_000_000
    assert Unit.MILLISECONDS.micros == 1_000
    assert Unit.MICROSECONDS.micros == 1


def test_constants_are_microseconds():
    """Test that the module constants count microseconds."""
    assert US_PER_SECOND == 1_000_000
    assert Unit.HOURS.micros == US_PER_HOUR == 3_600_000_000


def test_names():
    """Test singular and plural output names."""
    assert Unit.HOURS.plural == "hours"
    assert Unit.HOURS.singular == "hour"
    assert Unit.MICROSECONDS.singular == "microsecond"
    assert str(Unit.DAYS) == "days"


def test_short_codes():
    """Test short code lookups."""
    assert [u.short for u in Unit] == ["y", "w", "d", "h", "m", "s", "ms", "us"]
    assert Unit.from_short("ms") is Unit.MILLISECONDS
    assert Unit.from_short("µs") is Unit.MICROSECONDS
    assert Unit.from_short("μs") is Unit.MICROSECONDS
    assert Unit.from_short("ns") is None


class TestResolve:
    """Test resolving user supplied unit names."""

    @pytest.mark.parametrize("value", ["hours", "hour", "h", "HOURS", " hours ", Unit.HOURS])
    def test_resolves_hours(self, value):
        """Test the accepted spellings of a unit."""
        assert Unit.resolve(value) is Unit.HOURS

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset(self, value):
        """Test that None and empty mean no unit."""
        assert Unit.resolve(value) is None

    def test_unknown(self):
        """Test that an unknown name raises."""
        with pytest.raises(UnknownUnit) as exc_info:
            Unit.resolve("fortnight")
        assert exc_info.value.unit == "fortnight"


class TestCheckUnitTable:
    """Test the unit table consistency check."""

    @pytest.fixture
    def tables(self):
        return {u: u.short for u in Unit}, {u: u.micros for u in Unit}

    def test_current_table_is_consistent(self, tables):
        """Test that the shipped table passes."""
        check_unit_table(*tables)

    def test_missing_unit(self, tables):
        """Test that a unit without a short code is reported."""
        short_codes, micros = tables
        del short_codes[Unit.DAYS]
        with pytest.raises(RuntimeError, match="days"):
            check_unit_table(short_codes, micros)

    def test_duplicate_short_code(self, tables):
        """Test that short codes must be unique."""
        short_codes, micros = tables
        short_codes[Unit.DAYS] = "h"
        with pytest.raises(RuntimeError, match="unique"):
            check_unit_table(short_codes, micros)

    def test_factors_out_of_order(self, tables):
        """Test that factors must descend."""
        short_codes, micros = tables
        micros[Unit.WEEKS] = micros[Unit.YEARS]
        with pytest.raises(RuntimeError, match="descending"):
            check_unit_table(short_codes, micros)
