"""MPU6050 inertial measurement unit: calibration, angle fusion and IMU messages."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

SENSOR_ADDRESS = 0x68
WHO_AM_I_REG = 0x75
PWR_MGMT_1_REG = 0x6B
ACCEL_XOUT = 0x3B
ACCEL_YOUT = 0x3D
ACCEL_ZOUT = 0x3F
GYRO_XOUT = 0x43
GYRO_YOUT = 0x45
GYRO_ZOUT = 0x47

ACCEL_LSB_PER_G = 16384.0
GYRO_LSB_PER_DPS = 131.0
GYRO_SCALE = 1 / GYRO_LSB_PER_DPS
G_TO_ACCEL = 9.81
ACCEL_COVARIANCE = 0.00001
GYRO_COVARIANCE = 0.00001
DEFAULT_CALIBRATION_SAMPLES = 800
GYRO_DEADBAND = 0.01

# Fixed offsets measured for this particular sensor.
ACC_ANGLE_X_OFFSET = -2.682687929
ACC_ANGLE_Y_OFFSET = 6.097904643
GYRO_X_OFFSET = 0.8151635714
GYRO_Y_OFFSET = 2.063793857
GYRO_Z_OFFSET = 3.518060286

ROLL_PITCH_GYRO_WEIGHT = 0.96
ROLL_PITCH_ACCEL_WEIGHT = 0.04


class RegisterBus(Protocol):
    """Register access to one device on an I2C bus."""

    def read(self, register: int, length: int) -> bytes: ...

    def write(self, register: int, value: int) -> None: ...


def to_int16(high: int, low: int) -> int:
    """Combine two bytes, most significant first, into a signed 16-bit integer."""
    value = ((high & 0xFF) << 8) | (low & 0xFF)
    return value - 0x10000 if value & 0x8000 else value


def _zero_covariance() -> list[float]:
    return [0.0] * 9


@dataclass
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class ImuMessage:
    """Angular velocity and linear acceleration with their covariances."""

    frame_id: str = "imu_link"
    angular_velocity: Vector3 = field(default_factory=Vector3)
    angular_velocity_covariance: list[float] = field(default_factory=_zero_covariance)
    linear_acceleration: Vector3 = field(default_factory=Vector3)
    linear_acceleration_covariance: list[float] = field(default_factory=_zero_covariance)


def _accel_angles(ax: float, ay: float, az: float) -> tuple[float, float]:
    angle_x = math.degrees(math.atan2(ay, math.sqrt(ax * ax + az * az)))
    angle_y = math.degrees(math.atan2(-ax, math.sqrt(ay * ay + az * az)))
    return angle_x, angle_y


class Mpu6050:
    """Driver for an MPU6050 reached through a register bus."""

    def __init__(self, bus: RegisterBus) -> None:
        self.bus = bus
        self.acc_error_x = 0.0
        self.acc_error_y = 0.0
        self.gyro_error = Vector3()
        self.gyro_angle_x = 0.0
        self.gyro_angle_y = 0.0
        self.roll = 0.0
        self.pitch = 0.0
        self.yaw = 0.0
        self._current_time_us = 0.0
        self.message = ImuMessage()

    def _read_word(self, register: int) -> int:
        data = self.bus.read(register, 2)
        if len(data) < 2:
            raise OSError(f"short read from register 0x{register:02X}")
        return to_int16(data[0], data[1])

    def _raw_accel(self) -> tuple[int, int, int]:
        return (
            self._read_word(ACCEL_XOUT),
            self._read_word(ACCEL_YOUT),
            self._read_word(ACCEL_ZOUT),
        )

    def _raw_gyro(self) -> tuple[int, int, int]:
        return (
            self._read_word(GYRO_XOUT),
            self._read_word(GYRO_YOUT),
            self._read_word(GYRO_ZOUT),
        )

    def setup(self) -> int:
        """Wake the sensor, calibrate it and return its WHO_AM_I byte."""
        self.bus.write(PWR_MGMT_1_REG, 0)
        data = self.bus.read(WHO_AM_I_REG, 1)
        if not data:
            raise OSError("short read from WHO_AM_I register")
        who_am_i = data[0]
        logger.info("WHO_AM_I = %X", who_am_i)
        self.calculate_error()
        self.message.frame_id = "imu_link"
        return who_am_i

    def calculate_error(self, samples: int = DEFAULT_CALIBRATION_SAMPLES) -> None:
        """Average resting readings into gyro (deg/s) and accel-angle (deg) errors."""
        if samples <= 0:
            raise ValueError("samples must be positive")

        sum_x = sum_y = sum_z = 0.0
        for _ in range(samples):
            gx, gy, gz = self._raw_gyro()
            sum_x += gx / GYRO_LSB_PER_DPS
            sum_y += gy / GYRO_LSB_PER_DPS
            sum_z += gz / GYRO_LSB_PER_DPS
        self.gyro_error = Vector3(sum_x / samples, sum_y / samples, sum_z / samples)

        acc_x = acc_y = 0.0
        for _ in range(samples):
            ax, ay, az = (v / ACCEL_LSB_PER_G for v in self._raw_accel())
            angle_x, angle_y = _accel_angles(ax, ay, az)
            acc_x += angle_x
            acc_y += angle_y
        self.acc_error_x = acc_x / samples
        self.acc_error_y = acc_y / samples

        logger.info("AccErrorX: %f", self.acc_error_x)
        logger.info("AccErrorY: %f", self.acc_error_y)
        logger.info("GyroErrorX: %f", self.gyro_error.x)
        logger.info("GyroErrorY: %f", self.gyro_error.y)
        logger.info("GyroErrorZ: %f", self.gyro_error.z)

    def calculate_angles(self, now_us: float) -> tuple[float, float, float]:
        """Fuse accelerometer and gyro into (roll, pitch, yaw) in degrees."""
        ax, ay, az = (v / ACCEL_LSB_PER_G for v in self._raw_accel())
        acc_angle_x, acc_angle_y = _accel_angles(ax, ay, az)
        acc_angle_x += ACC_ANGLE_X_OFFSET
        acc_angle_y += ACC_ANGLE_Y_OFFSET

        previous = self._current_time_us
        self._current_time_us = float(now_us)
        elapsed = (self._current_time_us - previous) / 1_000_000

        gx, gy, gz = self._raw_gyro()
        rate_x = gx / GYRO_LSB_PER_DPS + GYRO_X_OFFSET
        rate_y = gy / GYRO_LSB_PER_DPS + GYRO_Y_OFFSET
        rate_z = gz / GYRO_LSB_PER_DPS + GYRO_Z_OFFSET

        self.gyro_angle_x += rate_x * elapsed
        self.gyro_angle_y += rate_y * elapsed
        self.yaw += rate_z * elapsed
        self.roll = (
            ROLL_PITCH_GYRO_WEIGHT * self.gyro_angle_x
            + ROLL_PITCH_ACCEL_WEIGHT * acc_angle_x
        )
        self.pitch = (
            ROLL_PITCH_GYRO_WEIGHT * self.gyro_angle_y
            + ROLL_PITCH_ACCEL_WEIGHT * acc_angle_y
        )
        return self.roll, self.pitch, self.yaw

    def read_accelerometer(self) -> Vector3:
        """Linear acceleration in m/s^2, in whole g steps as the sensor code reports it."""
        # Readings are truncated to whole g before scaling.
        ax, ay, az = (int(v / ACCEL_LSB_PER_G) for v in self._raw_accel())
        return Vector3(ax * G_TO_ACCEL, ay * G_TO_ACCEL, az * G_TO_ACCEL)

    def read_gyroscope(self) -> Vector3:
        """Angular velocity in rad/s."""
        factor = GYRO_SCALE * (math.pi / 180)
        gx, gy, gz = self._raw_gyro()
        return Vector3(gx * factor, gy * factor, gz * factor)

    def get_data(self) -> ImuMessage:
        """Read both sensors into the IMU message, removing calibration error and noise."""
        msg = self.message
        gyro = self.read_gyroscope()
        rates = (
            gyro.x - self.gyro_error.x,
            gyro.y - self.gyro_error.y,
            gyro.z - self.gyro_error.z,
        )
        x, y, z = (0.0 if -GYRO_DEADBAND < r < GYRO_DEADBAND else r for r in rates)
        msg.angular_velocity = Vector3(x, y, z)
        for i in (0, 4, 8):
            msg.angular_velocity_covariance[i] = GYRO_COVARIANCE

        msg.linear_acceleration = self.read_accelerometer()
        for i in (0, 4, 8):
            msg.linear_acceleration_covariance[i] = ACCEL_COVARIANCE
        return msg