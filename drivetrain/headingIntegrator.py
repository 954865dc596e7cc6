import math
from typing import Optional, Sequence

from .config import DrivetrainConfig


# ============================================================================
# GYRO HEADING INTEGRATION
# ============================================================================
def wrap_heading(heading: float) -> float:
    """Wrap a heading in degrees into [0, 360)"""
    heading = math.fmod(heading, 360.0)
    if heading < 0:
        heading += 360.0
    # tiny negative values round up to exactly 360 after the add
    if heading >= 360.0:
        heading = 0.0
    return heading


def integrate_heading(prev_heading: float, rate: float, dt: float) -> float:
    """
    Open-loop integration of a yaw rate sample.

    Args:
        prev_heading: Previous absolute heading (degrees)
        rate: Angular velocity about the vertical axis (rad/s)
        dt: Period the sample covers (seconds)

    Returns: new heading in degrees, wrapped to [0, 360)
    """
    return wrap_heading(prev_heading + math.degrees(rate * dt))


class HeadingIntegrator:
    """Picks the vertical component from the gyro vector and integrates it"""
    def __init__(self, cfg: DrivetrainConfig):
        self.cfg = cfg

    def update(self, prev_heading: float, gyro_values: Sequence[float],
               dt: Optional[float] = None) -> float:
        if dt is None:
            dt = self.cfg.dt
        return integrate_heading(prev_heading, gyro_values[self.cfg.gyro_axis], dt)
