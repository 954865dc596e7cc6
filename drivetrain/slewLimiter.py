import math
from typing import Optional

from .config import DrivetrainConfig
from .robotState import DriveCommand, WheelLimiterState


# ============================================================================
# ACCELERATION (SLEW-RATE) LIMITER
# ============================================================================
def limit_step(prev: float, cmd: float, dt: float, max_speed: float, max_accel: float) -> float:
    """
    Bound the change of a normalized wheel command over one control period.

    The implied acceleration max_speed * (cmd - prev) / dt is clamped to
    max_accel, i.e. the command may move at most max_accel * dt / max_speed
    per call. Commands already within reach are returned unchanged.
    """
    max_step = max_accel * dt / max_speed
    delta = cmd - prev
    if abs(delta) <= max_step:
        return cmd
    return prev + math.copysign(max_step, delta)


class SlewLimiter:
    """Per-side acceleration limiter; remembers the last command sent"""
    def __init__(self, cfg: DrivetrainConfig, state: Optional[WheelLimiterState] = None):
        self.cfg = cfg
        self.state = state if state is not None else WheelLimiterState()

    @property
    def max_step(self) -> float:
        """Largest normalized change allowed in one nominal period"""
        return self.cfg.max_accel * self.cfg.dt / self.cfg.max_speed

    def calculate(self, command: DriveCommand, dt: Optional[float] = None) -> DriveCommand:
        """
        Limit both sides and store the result as the new previous command.

        Args:
            command: Desired normalized command
            dt: Measured period of this tick (seconds); nominal cfg.dt if None
        """
        if dt is None:
            dt = self.cfg.dt

        left = limit_step(self.state.prev_left, command.left, dt,
                          self.cfg.max_speed, self.cfg.max_accel)
        right = limit_step(self.state.prev_right, command.right, dt,
                           self.cfg.max_speed, self.cfg.max_accel)

        self.state.prev_left = left
        self.state.prev_right = right
        return DriveCommand(left, right)

    def reset(self, left: float = 0.0, right: float = 0.0):
        self.state.prev_left = left
        self.state.prev_right = right
