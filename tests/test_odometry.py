import math

import pytest

from rovercore.odometry import Odometry, OdometryMessage, euler_to_quat


def test_identity_rotation():
    assert euler_to_quat(0.0, 0.0, 0.0) == pytest.approx((1.0, 0.0, 0.0, 0.0))


@pytest.mark.parametrize("angles", [(0.3, -0.2, 1.1), (1.5, 0.4, -2.7), (0.0, 0.0, math.pi)])
def test_quaternion_is_unit_length(angles):
    q = euler_to_quat(*angles)
    assert sum(c * c for c in q) == pytest.approx(1.0)


def test_half_turn_yaw():
    w, x, y, z = euler_to_quat(0.0, 0.0, math.pi)
    assert (w, x, y) == pytest.approx((0.0, 0.0, 0.0))
    assert z == pytest.approx(1.0)


def test_opposite_yaws_mirror_z():
    q_pos = euler_to_quat(0.0, 0.0, 0.7)
    q_neg = euler_to_quat(0.0, 0.0, -0.7)
    assert q_pos[0] == pytest.approx(q_neg[0])
    assert q_pos[3] == pytest.approx(-q_neg[3])


def test_default_message_frames():
    msg = Odometry().message
    assert msg.frame_id == "odom"
    assert msg.child_frame_id == "base_footprint"
    assert msg.pose_covariance == [0.0] * 36


def test_straight_line_motion():
    odom = Odometry()
    msg = odom.update(2.0, 1.5, 0.0, 0.0)
    assert msg.position == pytest.approx((3.0, 0.0, 0.0))
    assert msg.orientation == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_turn_then_forward_moves_along_y():
    odom = Odometry()
    odom.update(1.0, 0.0, 0.0, math.pi / 2)
    assert odom.heading == pytest.approx(math.pi / 2)
    odom.update(1.0, 1.0, 0.0, 0.0)
    assert odom.x_pos == pytest.approx(0.0, abs=1e-9)
    assert odom.y_pos == pytest.approx(1.0)


def test_lateral_motion_at_zero_heading():
    odom = Odometry()
    odom.update(1.0, 0.0, 0.5, 0.0)
    assert (odom.x_pos, odom.y_pos) == pytest.approx((0.0, 0.5))


def test_twist_echoes_inputs_and_covariances_set():
    odom = Odometry()
    msg = odom.update(0.1, 0.4, -0.2, 0.3)
    assert msg.linear == (0.4, -0.2, 0.0)
    assert msg.angular == (0.0, 0.0, 0.3)
    assert [msg.pose_covariance[i] for i in (0, 7, 35)] == [0.001] * 3
    assert [msg.twist_covariance[i] for i in (0, 7, 35)] == [0.0001] * 3
    assert sum(msg.pose_covariance) == pytest.approx(0.003)


def test_orientation_matches_heading():
    odom = Odometry()
    msg = odom.update(0.5, 0.0, 0.0, 1.2)
    w, x, y, z = euler_to_quat(0.0, 0.0, odom.heading)
    assert msg.orientation == pytest.approx((x, y, z, w))


def test_messages_have_independent_covariances():
    a = OdometryMessage()
    b = OdometryMessage()
    a.pose_covariance[0] = 1.0
    assert b.pose_covariance[0] == 0.0