import math
from typing import Tuple

from .config import DrivetrainConfig


# ============================================================================
# JOYSTICK INPUT SHAPING
# ============================================================================
def shape_axis(raw: float, max_joy: float = 32768.0, threshold: float = 0.02) -> float:
    """
    Normalize a raw joystick axis reading and apply the response curve.

    The axis sign is inverted (pushing the stick forward reads negative),
    the value is squared keeping its sign for finer low-speed control, and
    anything below the threshold is rounded down to zero.
    """
    value = -raw / max_joy
    value = math.copysign(value * value, value)
    if abs(value) < threshold:
        return 0.0
    return value


class InputShaper:
    """Shapes the speed and rotation axes of the drive joystick"""
    def __init__(self, cfg: DrivetrainConfig):
        self.cfg = cfg

    def shape(self, raw: float) -> float:
        return shape_axis(raw, self.cfg.max_joy, self.cfg.joy_threshold)

    def shape_axes(self, speed_raw: float, rotation_raw: float) -> Tuple[float, float]:
        """Returns: (speed, rotation) each in [-1, 1] for in-range readings"""
        return self.shape(speed_raw), self.shape(rotation_raw)
