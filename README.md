# rovercore

Building blocks for a small rover. The package has a PID controller, drive
kinematics, wheel odometry, MPU6050 IMU processing, wheel-encoder pulse
counting and RPM measurement, a status LED, and H-bridge motor drive logic.

Hardware access goes through small interfaces that you pass in: a register
bus for the IMU, a digital output for the LED, and a PWM driver for the
motors. The same code runs against real devices or against fakes in tests.

## Installation

```
pip install rovercore
```

To run the test suite:

```
pip install "rovercore[test]"
pytest
```

## Modules

- `rovercore.pid` provides `PID(min_val, max_val, kp, ki, kd)`.
  - `compute(setpoint, measured_value)` advances the controller one step and
    returns the output clamped to `[min_val, max_val]`. When both the
    setpoint and the error are zero, the integral and derivative terms are
    reset.
  - `update_constants(kp, ki, kd)` replaces the gains and keeps the
    accumulated state.
  - `constrain(value, min_val, max_val)` is the clamping helper.
- `rovercore.kinematics` provides `Kinematics` for `Base.DIFFERENTIAL_DRIVE`,
  `Base.SKID_STEER` and `Base.MECANUM`.
  - `get_rpm` and `calculate_rpm` turn body velocities into `WheelRPM`. The
    result is scaled down and clamped to `max_rpm`. `get_rpm` ignores
    lateral motion on non-mecanum bases.
  - `get_velocities` turns four wheel RPMs back into `Velocities`.
  - `total_wheels(base)` gives the wheel count for a base.
- `rovercore.odometry` provides `Odometry.update(vel_dt, linear_vel_x,
  linear_vel_y, angular_vel_z)`.
  - It integrates the pose and returns an `OdometryMessage`. The message
    holds the position, the orientation as `(x, y, z, w)`, the twist and
    the covariances.
  - `euler_to_quat(roll, pitch, yaw)` returns `(w, x, y, z)`.
- `rovercore.imu` provides `Mpu6050(bus)`, which wraps an object with
  `read(register, length)` and `write(register, value)`.
  - `setup()` wakes the sensor, calibrates it, and returns the WHO_AM_I
    byte.
  - `calculate_error(samples)` averages resting readings into error values.
  - `calculate_angles(now_us)` fuses accelerometer and gyroscope readings
    into roll, pitch and yaw in degrees.
  - `read_accelerometer()` and `read_gyroscope()` return `Vector3` values.
  - `get_data()` fills an `ImuMessage` with calibrated, dead-banded angular
    velocity and with linear acceleration.
  - `to_int16(high, low)` decodes a register pair.
- `rovercore.led` provides `Led(gpio, pin=27)` with `turn_on`, `turn_off`
  and `blink(n_times)`.
  - `blink` uses one-second on and off phases and adds a final one-second
    pause.
  - The sleep function can be injected.
- `rovercore.encoder` provides `PulseCounter` and `RpmMeter`.
  - `PulseCounter` counts rising edges with `pulse(count)`. The count wraps
    to zero at the high limit, and `clear()` resets it.
  - `RpmMeter.update(encoder_ticks, now_us)` returns `(delta_ticks /
    counts_per_rev) / (elapsed_us / 6_000_000)` since the previous reading.
    It raises `ValueError` if the timestamp does not advance.
- `rovercore.drive` provides `MotorOutput` and `Rover`.
  - `MotorOutput` drives one motor through the A/B outputs of one PWM
    timer, with `forward(duty_cycle)`, `backward(duty_cycle)` and `stop()`.
  - `Rover(driver, pins)` configures two timers. Its `forward`, `backward`
    and `stop` account for the mirrored right motor.
  - Pin layouts `ROVER_PINS` and `BENCH_PINS` are included.

## Example

```python
from rovercore.kinematics import Base, Kinematics
from rovercore.odometry import Odometry
from rovercore.pid import PID

kinematics = Kinematics(Base.DIFFERENTIAL_DRIVE, 100, 1.0, 12.0, 12.0, 0.065, 0.17)
target = kinematics.get_rpm(0.3, 0.0, 0.5)

pid = PID(-100.0, 100.0, kp=0.6, ki=0.8, kd=0.5)
command = pid.compute(target.motor1, measured_value=0.0)

velocities = kinematics.get_velocities(target.motor1, target.motor2, 0.0, 0.0)
odometry = Odometry()
message = odometry.update(0.1, velocities.linear_x, velocities.linear_y, velocities.angular_z)
```

## Command line

`rovercore-pid-demo` runs the PID walk-through. It prints the controller's
state after setup, after the gains are updated, and after one compute step:

```
rovercore-pid-demo
```

## What it does not do

- rovercore ships no hardware backends. You supply the I2C register bus,
  GPIO output and PWM driver objects yourself.
- It has no range-scanner support and no battery-voltage monitoring.
- It has no message transport or publishing. Messages are plain Python
  objects for you to send on.