import math
from typing import List, Tuple

from .robotState import OdometryState, Pose2D


# ============================================================================
# DIFFERENTIAL DRIVE ODOMETRY (DEAD RECKONING)
# ============================================================================
class DifferentialDriveOdometry:
    """
    Tracks the robot pose from cumulative wheel distances and gyro heading

    Coordinate Convention:
    - Heading is in degrees, 0 along the local +X sensor axis
    - Heading 90° drives along world +Y
    - Straight-line motion is assumed within one update (no arc correction)
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, heading: float = 90.0):
        self.state = OdometryState(pose=Pose2D(x, y, heading))

        # Store trajectory history
        self.trajectory_x = [x]
        self.trajectory_y = [y]
        self.max_history = 500

        print(f"✓ Odometry initialized at {self.state.pose}")

    @property
    def pose(self) -> Pose2D:
        return self.state.pose

    @property
    def x(self) -> float:
        return self.state.pose.x

    @property
    def y(self) -> float:
        return self.state.pose.y

    @property
    def heading(self) -> float:
        return self.state.pose.heading

    def update(self, heading: float, left_distance: float, right_distance: float) -> Pose2D:
        """
        Update the pose from the heading and the total meters travelled by each side.

        Args:
            heading: Absolute heading (degrees, already wrapped to [0, 360))
            left_distance: Cumulative left side distance (meters)
            right_distance: Cumulative right side distance (meters)
        """
        state = self.state
        angle = math.radians(heading) + math.pi / 2
        avg_delta = 0.5 * ((left_distance - state.prev_left_distance) +
                           (right_distance - state.prev_right_distance))

        state.pose.x += math.sin(angle) * avg_delta
        state.pose.y += -math.cos(angle) * avg_delta
        state.pose.heading = heading

        state.prev_left_distance = left_distance
        state.prev_right_distance = right_distance

        self._record()
        return state.pose

    def reset(self, x: float = 0.0, y: float = 0.0, heading: float = 90.0):
        """Move the pose and forget the previous encoder distances"""
        self.state = OdometryState(pose=Pose2D(x, y, heading))
        self.trajectory_x = [x]
        self.trajectory_y = [y]
        print(f"Odometry reset to {self.state.pose}")

    def get_pose(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.heading)

    def path(self) -> List[Tuple[float, float]]:
        return list(zip(self.trajectory_x, self.trajectory_y))

    def _record(self):
        self.trajectory_x.append(self.state.pose.x)
        self.trajectory_y.append(self.state.pose.y)

        # Limit history size
        if len(self.trajectory_x) > self.max_history:
            self.trajectory_x.pop(0)
            self.trajectory_y.pop(0)

    def __str__(self) -> str:
        return str(self.state.pose)
