import itertools

import pytest

from drivetrain.arcadeMixer import arcade_drive, clamp_magnitude
from drivetrain.robotState import DriveCommand


def test_fixed_points():
    assert arcade_drive(0, 0) == DriveCommand(0.0, 0.0)
    cmd = arcade_drive(1, 0)
    assert (cmd.left, cmd.right) == (0.5, 0.5)
    cmd = arcade_drive(0, 1)
    assert (cmd.left, cmd.right) == (-0.5, 0.5)


def test_saturation_truncates_without_rescale():
    cmd = arcade_drive(1, 1)
    assert (cmd.left, cmd.right) == (0, 1)
    cmd = arcade_drive(-1, 1)
    assert (cmd.left, cmd.right) == (-1, 0)


@pytest.mark.parametrize("speed,rotation", list(itertools.product([-1, -0.6, 0, 0.3, 1], repeat=2)))
def test_outputs_stay_in_range(speed, rotation):
    cmd = arcade_drive(speed, rotation)
    assert -1.0 <= cmd.left <= 1.0
    assert -1.0 <= cmd.right <= 1.0


def test_clamp_magnitude():
    assert clamp_magnitude(1.5) == 1.0
    assert clamp_magnitude(-1.5) == -1.0
    assert clamp_magnitude(0.25) == 0.25
