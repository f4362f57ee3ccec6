"""Dead-reckoning odometry from body velocities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def euler_to_quat(roll: float, pitch: float, yaw: float) -> tuple[float, float, float, float]:
    """Convert Euler angles in radians to a quaternion ordered (w, x, y, z)."""
    cy = math.cos(yaw * 0.5)
    sy = math.sin(yaw * 0.5)
    cp = math.cos(pitch * 0.5)
    sp = math.sin(pitch * 0.5)
    cr = math.cos(roll * 0.5)
    sr = math.sin(roll * 0.5)

    return (
        cy * cp * cr + sy * sp * sr,
        cy * cp * sr - sy * sp * cr,
        sy * cp * sr + cy * sp * cr,
        sy * cp * cr - cy * sp * sr,
    )


def _zero_covariance() -> list[float]:
    return [0.0] * 36


@dataclass
class OdometryMessage:
    """Pose and twist of the robot in the odometry frame."""

    frame_id: str = "odom"
    child_frame_id: str = "base_footprint"
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    pose_covariance: list[float] = field(default_factory=_zero_covariance)
    linear: tuple[float, float, float] = (0.0, 0.0, 0.0)
    angular: tuple[float, float, float] = (0.0, 0.0, 0.0)
    twist_covariance: list[float] = field(default_factory=_zero_covariance)


class Odometry:
    """Integrates body velocities into a planar pose."""

    def __init__(self) -> None:
        self.x_pos = 0.0
        self.y_pos = 0.0
        self.heading = 0.0
        self.message = OdometryMessage()

    def update(
        self,
        vel_dt: float,
        linear_vel_x: float,
        linear_vel_y: float,
        angular_vel_z: float,
    ) -> OdometryMessage:
        """Advance the pose by ``vel_dt`` seconds and return the updated message."""
        delta_heading = angular_vel_z * vel_dt
        cos_h = math.cos(self.heading)
        sin_h = math.sin(self.heading)
        delta_x = (linear_vel_x * cos_h - linear_vel_y * sin_h) * vel_dt
        delta_y = (linear_vel_x * sin_h + linear_vel_y * cos_h) * vel_dt

        self.x_pos += delta_x
        self.y_pos += delta_y
        self.heading += delta_heading

        w, qx, qy, qz = euler_to_quat(0.0, 0.0, self.heading)

        msg = self.message
        msg.position = (self.x_pos, self.y_pos, 0.0)
        msg.orientation = (qx, qy, qz, w)
        for i in (0, 7, 35):
            msg.pose_covariance[i] = 0.001
        msg.linear = (linear_vel_x, linear_vel_y, 0.0)
        msg.angular = (0.0, 0.0, angular_vel_z)
        for i in (0, 7, 35):
            msg.twist_covariance[i] = 0.0001
        return msg