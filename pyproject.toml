[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rovercore"
version = "0.1.0"
description = "PID control, drive kinematics, odometry, IMU, encoder, LED and motor-drive building blocks for a small rover"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "rover", "pid", "kinematics", "odometry", "imu", "mpu6050", "encoder", "pwm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rovercore-pid-demo = "rovercore.pid:main"

[tool.hatch.build.targets.wheel]
packages = ["rovercore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
