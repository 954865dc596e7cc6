import matplotlib

matplotlib.use("Agg")

import pytest

from drivetrain.config import DrivetrainConfig


@pytest.fixture
def cfg():
    return DrivetrainConfig()
