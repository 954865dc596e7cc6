import pytest

from drivetrain.simulatedRobot import SimulatedRobot


def test_encoders_count_wheel_travel(cfg):
    robot = SimulatedRobot(cfg)
    for name in cfg.motor_names:
        robot.set_motor_velocity(name, cfg.motor_free_speed)
    robot.step(1000)

    left_name, right_name = cfg.encoder_names
    distance = robot.get_encoder_value(left_name) * cfg.distance_per_tick
    assert distance == pytest.approx(cfg.max_speed)
    assert robot.get_encoder_value(right_name) == pytest.approx(robot.get_encoder_value(left_name))
    assert robot.get_gyro_values() == (0.0, 0.0, 0.0)


def test_gyro_reports_yaw_rate(cfg):
    robot = SimulatedRobot(cfg)
    fl, fr, bl, br = cfg.motor_names
    robot.set_motor_velocity(fl, -cfg.motor_free_speed)
    robot.set_motor_velocity(bl, -cfg.motor_free_speed)
    robot.set_motor_velocity(fr, cfg.motor_free_speed)
    robot.set_motor_velocity(br, cfg.motor_free_speed)
    robot.step(32)

    rate = robot.get_gyro_values()[cfg.gyro_axis]
    assert rate == pytest.approx(2 * cfg.max_speed / cfg.track_width)


def test_duration_ends_stepping(cfg):
    robot = SimulatedRobot(cfg, duration=0.064)
    assert robot.step(32) == 0
    assert robot.step(32) == 0
    assert robot.step(32) == -1


def test_joystick_script_feeds_axes(cfg):
    robot = SimulatedRobot(cfg, lambda t: (-1000, 2000, 1 if t > 0 else -1))
    assert robot.get_axis_value(cfg.speed_axis) == -1000
    assert robot.get_axis_value(cfg.rotation_axis) == 2000
    assert robot.get_pressed_button() == -1
    robot.step(32)
    assert robot.get_pressed_button() == 1


def test_unknown_motor_raises(cfg):
    robot = SimulatedRobot(cfg)
    with pytest.raises(KeyError):
        robot.set_motor_velocity("Motor XX", 1.0)
