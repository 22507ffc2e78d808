"""Tests for cycle-counter frequency estimation."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from diaglog.clock.base import ClockSource
from diaglog.clock.frequency import estimate_frequency, processor_frequency
from diaglog.clock.manual import ManualClock
from diaglog.clock.system import SystemClock
from diaglog.config import DiagConfig
from diaglog.exceptions import DiagLogError


class _FrozenClock(ClockSource):
    """Test double: time never moves."""

    @property
    def name(self) -> str:
        return "frozen"

    def now(self) -> float:
        return 0.0

    def monotonic(self) -> float:
        return 0.0

    def cycle_count(self) -> int:
        return 0

    def sleep(self, seconds: float) -> None:
        pass


class TestEstimateFrequency:
    """Tests for the uncached measurement."""

    def test_manual_clock_rate(self) -> None:
        clock = ManualClock(cycles_per_second=2_500_000)
        assert estimate_frequency(clock, 0.01, 3) == pytest.approx(2_500_000, rel=1e-6)

    def test_system_clock_is_nanoseconds(self) -> None:
        rate = estimate_frequency(SystemClock(), 0.005, 3)
        assert rate == pytest.approx(1e9, rel=0.05)

    def test_frozen_clock_raises(self) -> None:
        with pytest.raises(DiagLogError, match="frozen"):
            estimate_frequency(_FrozenClock(), 0.01, 3)


class TestProcessorFrequency:
    """Tests for the cached per-clock estimate."""

    def test_computed_once_per_clock(self) -> None:
        clock = _FrozenClock()
        config = DiagConfig(frequency_calibration_s=0.001, frequency_calibration_rounds=2)
        with patch(
            "diaglog.clock.frequency.estimate_frequency", return_value=123.0
        ) as mock_estimate:
            assert processor_frequency(clock, config) == 123.0
            assert processor_frequency(clock, config) == 123.0
        mock_estimate.assert_called_once_with(clock, 0.001, 2)

    def test_separate_clocks_cached_separately(self) -> None:
        fast = ManualClock(cycles_per_second=4_000_000)
        slow = ManualClock(cycles_per_second=1_000)
        assert processor_frequency(fast) == pytest.approx(4_000_000, rel=1e-6)
        assert processor_frequency(slow) == pytest.approx(1_000, rel=1e-3)

    def test_nominal_frequency_skips_calibration(self, manual_clock: ManualClock) -> None:
        with patch("diaglog.clock.frequency.estimate_frequency") as mock_estimate:
            assert processor_frequency(manual_clock) == 1_000_000.0
        mock_estimate.assert_not_called()
        assert manual_clock.monotonic() == 0.0

    def test_default_clock(self) -> None:
        assert processor_frequency() == pytest.approx(1e9, rel=0.05)
