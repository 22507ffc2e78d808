"""Tests for SystemClock and the default-clock helpers."""

from __future__ import annotations

import time

import pytest

from diaglog.clock.system import SystemClock, get_default_clock, now, sleep


class TestSystemClock:
    """Tests for the ``time`` module wrapper."""

    def test_name(self) -> None:
        assert SystemClock().name == "system"

    def test_now_is_wall_clock(self) -> None:
        assert SystemClock().now() == pytest.approx(time.time(), abs=1.0)

    def test_cycle_count_is_monotonic(self) -> None:
        clock = SystemClock()
        readings = [clock.cycle_count() for _ in range(1000)]
        assert readings == sorted(readings)
        assert all(isinstance(r, int) for r in readings)

    def test_sleep_waits(self) -> None:
        clock = SystemClock()
        start = clock.monotonic()
        clock.sleep(0.02)
        assert clock.monotonic() - start >= 0.015

    def test_negative_sleep_returns(self) -> None:
        SystemClock().sleep(-1.0)  # Should not raise.

    def test_module_helpers_use_default_clock(self) -> None:
        assert isinstance(get_default_clock(), SystemClock)
        assert get_default_clock() is get_default_clock()
        assert now() == pytest.approx(time.time(), abs=1.0)
        sleep(0)
