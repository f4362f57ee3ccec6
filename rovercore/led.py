"""Status LED on a digital output pin."""

from __future__ import annotations

import time
from typing import Callable, Protocol

BLINK_GPIO = 27
BLINK_PERIOD = 1.0


class DigitalOutput(Protocol):
    """The part of a GPIO controller the LED needs."""

    def configure_output(self, pin: int) -> None: ...

    def set_level(self, pin: int, level: int) -> None: ...


class Led:
    """An LED driven high to light it."""

    def __init__(
        self,
        gpio: DigitalOutput,
        pin: int = BLINK_GPIO,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.gpio = gpio
        self.pin = pin
        self.is_on = False
        self._sleep = sleep
        gpio.configure_output(pin)

    def turn_on(self) -> None:
        """Light the LED."""
        self.gpio.set_level(self.pin, 1)
        self.is_on = True

    def turn_off(self) -> None:
        """Switch the LED off."""
        self.gpio.set_level(self.pin, 0)
        self.is_on = False

    def blink(self, n_times: int) -> None:
        """Flash ``n_times`` with one-second phases, then pause one more second."""
        for _ in range(n_times):
            self.turn_on()
            self._sleep(BLINK_PERIOD)
            self.turn_off()
            self._sleep(BLINK_PERIOD)
        self._sleep(BLINK_PERIOD)