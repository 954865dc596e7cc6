import pytest

from drivetrain.robotState import DriveCommand
from drivetrain.slowMode import SlowModeToggle


def test_toggles_once_per_press():
    toggle = SlowModeToggle()
    assert toggle.update(True) is True
    # held down: no further toggling
    assert toggle.update(True) is True
    assert toggle.update(True) is True
    assert toggle.update(False) is True
    assert toggle.update(True) is False
    assert toggle.update(False) is False


def test_scales_command_when_active():
    toggle = SlowModeToggle(factor=0.5)
    command = DriveCommand(0.8, -0.4)
    assert toggle.apply(command) == command

    toggle.update(True)
    slowed = toggle.apply(command)
    assert slowed.left == pytest.approx(0.4)
    assert slowed.right == pytest.approx(-0.2)
