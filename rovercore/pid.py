"""Discrete PID controller with clamped output."""

from __future__ import annotations

from dataclasses import dataclass


def constrain(value: float, min_val: float, max_val: float) -> float:
    """Clamp ``value`` to the closed range [min_val, max_val]."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


@dataclass
class PID:
    """PID controller whose output is limited to [min_val, max_val]."""

    min_val: float
    max_val: float
    kp: float
    ki: float
    kd: float
    integral: float = 0.0
    derivative: float = 0.0
    prev_error: float = 0.0

    def compute(self, setpoint: float, measured_value: float) -> float:
        """Advance the controller one step and return the clamped output."""
        error = setpoint - measured_value
        self.integral += error
        self.derivative = error - self.prev_error

        if setpoint == 0 and error == 0:
            self.integral = 0.0
            self.derivative = 0.0

        value = self.kp * error + self.ki * self.integral + self.kd * self.derivative
        self.prev_error = error
        return constrain(value, self.min_val, self.max_val)

    def update_constants(self, kp: float, ki: float, kd: float) -> None:
        """Replace the three gains, keeping the accumulated state."""
        self.kp = kp
        self.ki = ki
        self.kd = kd


_ALL_FIELDS = (
    "min_val",
    "max_val",
    "kp",
    "ki",
    "kd",
    "integral",
    "derivative",
    "prev_error",
)
_GAIN_FIELDS = ("kp", "ki", "kd")


def _report(pid: PID, fields: tuple[str, ...]) -> None:
    for name in fields:
        print(f"pid1.{name}_ = {getattr(pid, name):.4f}")


def main(argv: list[str] | None = None) -> int:
    """Run the controller demonstration and print its state along the way."""
    pid = PID(min_val=1.099, max_val=10.0, kp=1, ki=2, kd=3)
    _report(pid, _ALL_FIELDS)

    pid.update_constants(5, 6, 7)
    _report(pid, _GAIN_FIELDS)

    pid.compute(1.0, 4.0)
    _report(pid, _ALL_FIELDS)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())