import pytest

from rovercore.pid import PID, constrain, main


def test_constrain_below_returns_min():
    assert constrain(-5.0, 1.0, 10.0) == 1.0


def test_constrain_above_returns_max():
    assert constrain(50.0, 1.0, 10.0) == 10.0


def test_constrain_inside_returns_value():
    assert constrain(3.5, 1.0, 10.0) == 3.5


def test_new_controller_has_zero_state():
    pid = PID(0.0, 1.0, 1.0, 2.0, 3.0)
    assert (pid.integral, pid.derivative, pid.prev_error) == (0.0, 0.0, 0.0)


def test_compute_output_stays_within_limits():
    pid = PID(-2.0, 2.0, 10.0, 10.0, 10.0)
    for setpoint, measured in [(5, 0), (-5, 0), (0, 7), (3, 3), (100, -100)]:
        out = pid.compute(setpoint, measured)
        assert -2.0 <= out <= 2.0


def test_compute_records_error_and_accumulates_integral():
    pid = PID(-100.0, 100.0, 0.0, 0.0, 0.0)
    pid.compute(4.0, 1.0)
    first_integral = pid.integral
    assert pid.prev_error == first_integral
    pid.compute(4.0, 1.0)
    assert pid.integral == pytest.approx(2 * first_integral)
    assert pid.derivative == 0.0


def test_zero_setpoint_and_zero_error_resets_state():
    pid = PID(-100.0, 100.0, 1.0, 1.0, 1.0)
    pid.compute(5.0, 1.0)
    pid.compute(5.0, 2.0)
    assert pid.integral != 0.0
    out = pid.compute(0.0, 0.0)
    assert pid.integral == 0.0
    assert pid.derivative == 0.0
    assert out == 0.0


def test_proportional_only_output_matches_clamped_error_sign():
    pid = PID(-100.0, 100.0, 1.0, 0.0, 0.0)
    assert pid.compute(2.0, 5.0) < 0
    assert pid.compute(5.0, 2.0) > 0


def test_negative_error_clamps_to_min():
    pid = PID(1.099, 10.0, 5.0, 6.0, 7.0)
    assert pid.compute(1.0, 4.0) == pytest.approx(1.099)


def test_update_constants_keeps_state():
    pid = PID(-10.0, 10.0, 1.0, 2.0, 3.0)
    pid.compute(3.0, 1.0)
    integral = pid.integral
    pid.update_constants(5.0, 6.0, 7.0)
    assert (pid.kp, pid.ki, pid.kd) == (5.0, 6.0, 7.0)
    assert pid.integral == integral


def test_main_prints_demo_state(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "pid1.min_val_ = 1.0990"
    assert "pid1.kp_ = 5.0000" in out
    assert out[-1] == "pid1.prev_error_ = -3.0000"