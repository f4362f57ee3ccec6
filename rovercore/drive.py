"""Two-wheel brushed motor drive over a motor-control PWM peripheral."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)

PWM_UNIT = 0
LEFT_TIMER = 0
RIGHT_TIMER = 1
PWM_FREQUENCY_HZ = 500


class Operator(Enum):
    """The two outputs of one PWM timer; each drives one side of an H-bridge."""

    A = "A"
    B = "B"


class DutyMode(Enum):
    """How the duty cycle maps onto the output level."""

    ACTIVE_HIGH = 0
    ACTIVE_LOW = 1


class CounterMode(Enum):
    """Direction the PWM timer counts in."""

    UP = "up"
    DOWN = "down"
    UP_DOWN = "up_down"


class Direction(Enum):
    """What a motor output is currently doing."""

    STOPPED = "stopped"
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class PwmConfig:
    """Initial settings applied to a PWM timer."""

    frequency: int = PWM_FREQUENCY_HZ
    duty_a: float = 0.0
    duty_b: float = 0.0
    counter_mode: CounterMode = CounterMode.UP
    duty_mode: DutyMode = DutyMode.ACTIVE_HIGH


@dataclass(frozen=True)
class WheelPins:
    """GPIO pins for the two H-bridge inputs of each wheel."""

    left_forward: int
    left_backward: int
    right_forward: int
    right_backward: int


# Wiring of the rover board.
ROVER_PINS = WheelPins(left_forward=15, left_backward=4, right_forward=19, right_backward=18)
# Wiring of the bench test rig.
BENCH_PINS = WheelPins(left_forward=15, left_backward=16, right_forward=17, right_backward=18)


class PwmDriver(Protocol):
    """The part of a motor-control PWM peripheral the drive needs."""

    def gpio_init(self, unit: int, signal: str, pin: int) -> None: ...

    def init(self, unit: int, timer: int, config: PwmConfig) -> None: ...

    def set_signal_low(self, unit: int, timer: int, operator: Operator) -> None: ...

    def set_duty(self, unit: int, timer: int, operator: Operator, duty: float) -> None: ...

    def set_duty_type(
        self, unit: int, timer: int, operator: Operator, mode: DutyMode
    ) -> None: ...


@dataclass
class MotorOutput:
    """One brushed motor driven by the A/B outputs of a single PWM timer."""

    driver: PwmDriver
    timer: int
    unit: int = PWM_UNIT
    direction: Direction = field(default=Direction.STOPPED, init=False)
    duty: float = field(default=0.0, init=False)

    def _drive(self, active: Operator, idle: Operator, duty_cycle: float) -> None:
        self.driver.set_signal_low(self.unit, self.timer, idle)
        self.driver.set_duty(self.unit, self.timer, active, duty_cycle)
        # Re-applied every time in case the operator was forced low or high.
        self.driver.set_duty_type(self.unit, self.timer, active, DutyMode.ACTIVE_HIGH)
        self.duty = duty_cycle

    def forward(self, duty_cycle: float) -> None:
        """Spin forward at ``duty_cycle`` percent."""
        self._drive(Operator.A, Operator.B, duty_cycle)
        self.direction = Direction.FORWARD

    def backward(self, duty_cycle: float) -> None:
        """Spin backward at ``duty_cycle`` percent."""
        self._drive(Operator.B, Operator.A, duty_cycle)
        self.direction = Direction.BACKWARD

    def stop(self) -> None:
        """Pull both outputs low."""
        self.driver.set_signal_low(self.unit, self.timer, Operator.A)
        self.driver.set_signal_low(self.unit, self.timer, Operator.B)
        self.direction = Direction.STOPPED
        self.duty = 0.0


class Rover:
    """Two-wheeled rover whose right motor is mounted mirrored to the left."""

    def __init__(
        self,
        driver: PwmDriver,
        pins: WheelPins = ROVER_PINS,
        *,
        unit: int = PWM_UNIT,
        left_timer: int = LEFT_TIMER,
        right_timer: int = RIGHT_TIMER,
        config: PwmConfig = PwmConfig(),
    ) -> None:
        self.driver = driver
        self.pins = pins
        self.unit = unit

        logger.info("initializing mcpwm gpio...")
        driver.gpio_init(unit, f"MCPWM{left_timer}A", pins.left_forward)
        driver.gpio_init(unit, f"MCPWM{left_timer}B", pins.left_backward)
        driver.gpio_init(unit, f"MCPWM{right_timer}A", pins.right_forward)
        driver.gpio_init(unit, f"MCPWM{right_timer}B", pins.right_backward)

        logger.info("Configuring Initial Parameters of mcpwm...")
        driver.init(unit, left_timer, config)
        driver.init(unit, right_timer, config)

        self.left = MotorOutput(driver, left_timer, unit)
        self.right = MotorOutput(driver, right_timer, unit)

    def forward(self, left_duty: float, right_duty: float) -> None:
        """Drive the rover forward."""
        self.left.forward(left_duty)
        self.right.backward(right_duty)

    def backward(self, left_duty: float, right_duty: float) -> None:
        """Drive the rover backward."""
        self.left.backward(left_duty)
        self.right.forward(right_duty)

    def stop(self) -> None:
        """Stop both wheels."""
        self.left.stop()
        self.right.stop()