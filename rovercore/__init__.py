"""PID control, drive kinematics, odometry, IMU, encoder, LED and motor-drive building blocks for a small rover."""

__version__ = "0.1.0"
__all__ = ["__version__"]