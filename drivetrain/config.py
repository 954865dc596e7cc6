from dataclasses import dataclass
import math
from typing import Tuple

INCH_TO_METER = 0.0254


# ============================================================================
# CONFIGURATION
# ============================================================================
@dataclass
class DrivetrainConfig:
    """Drivetrain hardware, joystick and control-loop configuration"""

    # --------------------------------------------------------------------- #
    # Control loop
    # --------------------------------------------------------------------- #
    sampling_period_ms: int = 20      # sensor / joystick sampling period
    dt: float = 0.032                 # nominal control period (seconds)
    max_steps: int = 0                # 0 = run until the robot stops stepping

    # --------------------------------------------------------------------- #
    # Joystick
    # --------------------------------------------------------------------- #
    max_joy: float = 32768.0          # magnitude of full deflection
    joy_threshold: float = 0.02       # dead-zone after squaring
    speed_axis: int = 2
    rotation_axis: int = 3
    slow_mode_button: int = 1
    slow_mode_factor: float = 0.5

    # --------------------------------------------------------------------- #
    # Physical robot parameters
    # --------------------------------------------------------------------- #
    wheel_base: float = 18.15 * INCH_TO_METER      # meters (front to back)
    track_width: float = 17.75 * INCH_TO_METER     # meters (left to right)
    motor_free_speed: float = 5330 * (2 * math.pi) / 60.0   # rad/s (CIM)
    drive_gearing: float = 6.67
    wheel_diameter: float = 5.0 * INCH_TO_METER    # meters
    max_accel: float = 9.8            # m/s²

    # --------------------------------------------------------------------- #
    # Sensors
    # --------------------------------------------------------------------- #
    encoder_cpr: float = 5.0
    gyro_axis: int = 1                # vertical axis of the gyro vector

    # --------------------------------------------------------------------- #
    # Device names: keep exactly as they appear in the robot model
    # --------------------------------------------------------------------- #
    motor_names: Tuple[str, str, str, str] = ("Motor FL", "Motor FR", "Motor BL", "Motor BR")
    encoder_names: Tuple[str, str] = ("Encoder FL", "Encoder FR")
    gyro_name: str = "Gyro"

    # --------------------------------------------------------------------- #
    # Initial pose (heading 90° = facing +Y)
    # --------------------------------------------------------------------- #
    initial_x: float = 0.0
    initial_y: float = 0.0
    initial_heading: float = 90.0

    @property
    def max_speed(self) -> float:
        """Linear wheel speed at motor free speed (m/s): radius * free speed / gearing"""
        return (self.wheel_diameter / 2.0) * self.motor_free_speed / self.drive_gearing

    @property
    def max_rotation(self) -> float:
        """Robot treated as a point mass on a circle: tangential speed / radius (rad/s)"""
        radius = math.sqrt((self.wheel_base / 2) ** 2 + (self.track_width / 2) ** 2)
        return self.max_speed / radius

    @property
    def distance_per_tick(self) -> float:
        """Meters travelled per encoder tick"""
        return (math.pi * self.wheel_diameter) / (self.encoder_cpr * self.drive_gearing)
