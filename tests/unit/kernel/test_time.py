"""Unit tests for kernel time utilities."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta, timezone

import pytest

from unklogger.kernel.time import (
    Clock,
    FrozenClock,
    SystemClock,
    format_timestamp,
    now,
)

_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


# ---------------------------------------------------------------------------
# SystemClock
# ---------------------------------------------------------------------------


class TestSystemClock:
    def test_now_returns_aware_local_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.tzinfo is not None

    def test_now_close_to_wall_clock(self) -> None:
        expected = datetime.now(UTC).timestamp()
        assert abs(SystemClock().now().timestamp() - expected) < 1.0

    def test_satisfies_protocol(self) -> None:
        clock: Clock = SystemClock()
        assert hasattr(clock, "now")


# ---------------------------------------------------------------------------
# FrozenClock
# ---------------------------------------------------------------------------


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2024, 6, 15, 12, 0, 0)

    def test_now_returns_fixed(self) -> None:
        assert FrozenClock(self._fixed()).now() == self._fixed()

    def test_now_is_stable(self) -> None:
        clk = FrozenClock(self._fixed())
        assert clk.now() == clk.now()

    def test_advance(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(hours=1, seconds=5)
        assert clk.now() == self._fixed() + timedelta(hours=1, seconds=5)


# ---------------------------------------------------------------------------
# Timestamp formatting
# ---------------------------------------------------------------------------


class TestFormatTimestamp:
    @pytest.mark.parametrize(
        ("moment", "expected"),
        [
            (datetime(2024, 6, 15, 12, 0, 0), "2024-06-15 12:00:00"),
            (datetime(2024, 1, 2, 3, 4, 5), "2024-01-02 03:04:05"),
            (datetime(1999, 12, 31, 23, 59, 59), "1999-12-31 23:59:59"),
            (datetime(5, 1, 1, 0, 0, 0), "0005-01-01 00:00:00"),
        ],
    )
    def test_zero_padded(self, moment: datetime, expected: str) -> None:
        assert format_timestamp(moment) == expected

    def test_drops_microseconds(self) -> None:
        assert format_timestamp(datetime(2024, 6, 15, 12, 0, 0, 999999)) == "2024-06-15 12:00:00"

    def test_ignores_zone_offset(self) -> None:
        aware = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=-3)))
        assert format_timestamp(aware) == "2024-06-15 12:00:00"


class TestNow:
    def test_system_clock_matches_format(self) -> None:
        assert _TIMESTAMP.match(now())

    def test_uses_given_clock(self) -> None:
        assert now(FrozenClock(datetime(2024, 6, 15, 12, 0, 0))) == "2024-06-15 12:00:00"
