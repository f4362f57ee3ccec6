"""Wheel encoder pulse counting and RPM measurement."""

from __future__ import annotations

from dataclasses import dataclass

PCNT_HIGH_LIMIT = 1000
PCNT_LOW_LIMIT = -1000

MOTOR_A_ENCODER = 14
MOTOR_B_ENCODER = 25

GLITCH_FILTER_NS = 1000
COUNTS_PER_REV = 20
# Elapsed microseconds are divided by this to get the time base of the RPM figure.
TIME_DIVISOR_US = 6_000_000


class PulseCounter:
    """Counts rising edges on one encoder pin, wrapping to zero at either limit."""

    def __init__(
        self,
        edge_pin: int,
        *,
        high_limit: int = PCNT_HIGH_LIMIT,
        low_limit: int = PCNT_LOW_LIMIT,
    ) -> None:
        if not low_limit < 0 < high_limit:
            raise ValueError("limits must satisfy low_limit < 0 < high_limit")
        self.edge_pin = edge_pin
        self.high_limit = high_limit
        self.low_limit = low_limit
        self.count = 0

    def clear(self) -> None:
        """Reset the count to zero."""
        self.count = 0

    def pulse(self, count: int = 1) -> int:
        """Register ``count`` rising edges and return the new count."""
        if count < 0:
            raise ValueError("rising edges only increase the count")
        span = self.high_limit
        self.count = (self.count + count) % span
        return self.count


@dataclass
class RpmMeter:
    """Turns successive encoder counts and timestamps into a rotation speed."""

    counts_per_rev: int = COUNTS_PER_REV
    prev_time_us: int = 0
    prev_ticks: int = 0

    def update(self, encoder_ticks: int, now_us: int) -> float:
        """Record a reading and return the speed since the previous one."""
        dt = now_us - self.prev_time_us
        if dt <= 0:
            raise ValueError("timestamp must advance between readings")
        dtm = dt / TIME_DIVISOR_US
        delta_ticks = encoder_ticks - self.prev_ticks

        self.prev_time_us = now_us
        self.prev_ticks = encoder_ticks

        return (delta_ticks / self.counts_per_rev) / dtm