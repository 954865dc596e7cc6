from dataclasses import dataclass, field


# ============================================================================
# DRIVETRAIN STATE
# ============================================================================
@dataclass
class DriveCommand:
    """Normalized wheel velocity fractions of max speed, each in [-1, 1]"""
    left: float = 0.0
    right: float = 0.0

    def scaled(self, factor: float) -> "DriveCommand":
        return DriveCommand(self.left * factor, self.right * factor)


@dataclass
class WheelLimiterState:
    """Previous limited command on each side, carried across ticks"""
    prev_left: float = 0.0
    prev_right: float = 0.0


@dataclass
class Pose2D:
    """Planar pose: x, y in meters, heading in degrees [0, 360)"""
    x: float = 0.0
    y: float = 0.0
    heading: float = 90.0

    def __str__(self) -> str:
        return f"({self.x:.5f}, {self.y:.5f}, {self.heading:.5f})"


@dataclass
class OdometryState:
    """Dead-reckoning state: last cumulative distances and the current pose"""
    pose: Pose2D = field(default_factory=Pose2D)
    prev_left_distance: float = 0.0
    prev_right_distance: float = 0.0
