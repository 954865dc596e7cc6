import math

from .robotState import DriveCommand


# ============================================================================
# ARCADE DRIVE
# ============================================================================
def clamp_magnitude(value: float, limit: float = 1.0) -> float:
    """Clamp |value| to limit, keeping the sign"""
    return math.copysign(min(abs(value), limit), value)


def arcade_drive(speed: float, rotation: float) -> DriveCommand:
    """
    Mix (speed, rotation) into (left, right) wheel commands.

    Each side is clamped on its own. Full speed with full rotation
    truncates the saturated side instead of rescaling both.
    """
    left = (speed - rotation) * 0.5
    right = (speed + rotation) * 0.5

    return DriveCommand(clamp_magnitude(left), clamp_magnitude(right))
