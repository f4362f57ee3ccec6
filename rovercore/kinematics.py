"""Forward and inverse kinematics for differential, skid-steer and mecanum bases."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Base(Enum):
    """Drive platform type."""

    DIFFERENTIAL_DRIVE = 0
    SKID_STEER = 1
    MECANUM = 2


@dataclass
class WheelRPM:
    """Target RPM of each motor: front-left, front-right, rear-left, rear-right."""

    motor1: float = 0.0
    motor2: float = 0.0
    motor3: float = 0.0
    motor4: float = 0.0


@dataclass
class Velocities:
    """Body velocities in m/s and rad/s."""

    linear_x: float = 0.0
    linear_y: float = 0.0
    angular_z: float = 0.0


def total_wheels(base: Base) -> int:
    """Number of driven wheels for a platform."""
    if base in (Base.SKID_STEER, Base.MECANUM):
        return 4
    return 2


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


class Kinematics:
    """Converts between body velocities and wheel RPMs for one robot."""

    def __init__(
        self,
        base: Base,
        motor_max_rpm: float,
        max_rpm_ratio: float,
        motor_operating_voltage: float,
        motor_power_max_voltage: float,
        wheel_diameter: float,
        wheels_y_distance: float,
    ) -> None:
        self.base = base
        self.wheels_y_distance = wheels_y_distance
        self.wheel_circumference = math.pi * wheel_diameter
        self.total_wheels = total_wheels(base)

        power_voltage = _clamp(motor_power_max_voltage, 0, motor_operating_voltage)
        self.max_rpm = (
            (power_voltage / motor_operating_voltage) * motor_max_rpm
        ) * max_rpm_ratio

    def calculate_rpm(self, linear_x: float, linear_y: float, angular_z: float) -> WheelRPM:
        """Wheel RPMs for the requested motion, scaled and clamped to max_rpm."""
        tangential_vel = angular_z * (self.wheels_y_distance / 2.0)

        x_rpm = linear_x * 60.0 / self.wheel_circumference
        y_rpm = linear_y * 60.0 / self.wheel_circumference
        tan_rpm = tangential_vel * 60.0 / self.wheel_circumference

        xy_sum = abs(x_rpm) + abs(y_rpm)
        xtan_sum = abs(x_rpm) + abs(tan_rpm)

        # Scale down proportionally so the motion keeps its shape at lower speed.
        if xy_sum >= self.max_rpm and angular_z == 0:
            scaler = self.max_rpm / xy_sum if xy_sum else 0.0
            x_rpm *= scaler
            y_rpm *= scaler
        elif xtan_sum >= self.max_rpm and linear_y == 0:
            scaler = self.max_rpm / xtan_sum if xtan_sum else 0.0
            x_rpm *= scaler
            tan_rpm *= scaler

        limit = self.max_rpm
        return WheelRPM(
            motor1=_clamp(x_rpm - y_rpm - tan_rpm, -limit, limit),
            motor2=_clamp(x_rpm + y_rpm + tan_rpm, -limit, limit),
            motor3=_clamp(x_rpm + y_rpm - tan_rpm, -limit, limit),
            motor4=_clamp(x_rpm - y_rpm + tan_rpm, -limit, limit),
        )

    def get_rpm(self, linear_x: float, linear_y: float, angular_z: float) -> WheelRPM:
        """Like calculate_rpm, ignoring lateral motion on non-holonomic bases."""
        if self.base in (Base.DIFFERENTIAL_DRIVE, Base.SKID_STEER):
            linear_y = 0.0
        return self.calculate_rpm(linear_x, linear_y, angular_z)

    def get_velocities(
        self, rpm1: float, rpm2: float, rpm3: float, rpm4: float
    ) -> Velocities:
        """Body velocities from measured wheel RPMs."""
        if self.base is Base.DIFFERENTIAL_DRIVE:
            rpm3 = 0.0
            rpm4 = 0.0

        wheels = self.total_wheels
        circumference = self.wheel_circumference

        average_rps_x = ((rpm1 + rpm2 + rpm3 + rpm4) / wheels) / 60.0
        linear_x = average_rps_x * circumference

        average_rps_y = ((-rpm1 + rpm2 + rpm3 - rpm4) / wheels) / 60.0
        linear_y = average_rps_y * circumference if self.base is Base.MECANUM else 0.0

        average_rps_a = ((-rpm1 + rpm2 - rpm3 + rpm4) / wheels) / 60.0
        angular_z = (average_rps_a * circumference) / (self.wheels_y_distance / 2.0)

        return Velocities(linear_x=linear_x, linear_y=linear_y, angular_z=angular_z)