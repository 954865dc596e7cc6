import math
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .config import DrivetrainConfig
from .robotInterface import RobotInterface

# time (s) -> (speed axis raw, rotation axis raw, pressed button or -1)
JoystickScript = Callable[[float], Tuple[float, float, int]]


def idle_joystick(t: float) -> Tuple[float, float, int]:
    return 0.0, 0.0, -1


# ============================================================================
# KINEMATIC DRIVETRAIN SIMULATION
# ============================================================================
class SimulatedRobot(RobotInterface):
    """
    Kinematic four-wheel differential drive plant

    Motors follow their commanded velocity instantly. Encoders count ticks
    from wheel travel, the gyro reports the true yaw rate (plus optional
    noise) on the configured axis. A ground-truth pose is kept alongside
    so odometry drift can be measured.
    """
    def __init__(self, cfg: DrivetrainConfig, joystick: JoystickScript = idle_joystick,
                 basic_time_step: int = 32, duration: Optional[float] = None,
                 gyro_noise_std: float = 0.0, seed: int = 0):
        self.cfg = cfg
        self.joystick = joystick
        self.basic_time_step = basic_time_step
        self.duration = duration
        self.gyro_noise_std = gyro_noise_std
        self.rng = np.random.default_rng(seed)

        self.time = 0.0
        self.enabled = False
        self.motor_velocities: Dict[str, float] = {name: 0.0 for name in cfg.motor_names}
        self.encoder_ticks: Dict[str, float] = {name: 0.0 for name in cfg.encoder_names}
        self.gyro = np.zeros(3)

        # Ground truth, heading in radians (same frame as the odometry)
        self.true_pose = np.array([cfg.initial_x, cfg.initial_y, math.radians(cfg.initial_heading)])

        self._axes = np.zeros(max(cfg.speed_axis, cfg.rotation_axis) + 1)
        self._button = -1
        self._sample_joystick()

    def start(self, sampling_period_ms: int):
        self.enabled = True
        print(f"✓ Simulated robot started (sampling {sampling_period_ms} ms, "
              f"step {self.basic_time_step} ms)")

    def stop(self):
        for name in self.motor_velocities:
            self.motor_velocities[name] = 0.0
        self.enabled = False

    def step(self, time_step_ms: int) -> int:
        if self.duration is not None and self.time >= self.duration:
            return -1

        dt = time_step_ms / 1000.0
        self._integrate(dt)
        self.time += dt
        self._sample_joystick()
        return 0

    def get_time(self) -> float:
        return self.time

    def get_basic_time_step(self) -> float:
        return float(self.basic_time_step)

    def get_axis_value(self, axis: int) -> int:
        return int(self._axes[axis])

    def get_pressed_button(self) -> int:
        return self._button

    def get_encoder_value(self, name: str) -> float:
        return self.encoder_ticks[name]

    def get_gyro_values(self) -> Tuple[float, float, float]:
        return tuple(float(v) for v in self.gyro)

    def set_motor_velocity(self, name: str, velocity: float):
        if name not in self.motor_velocities:
            raise KeyError(f"Unknown motor: {name}")
        self.motor_velocities[name] = velocity

    def wheel_speeds(self) -> Tuple[float, float]:
        """Linear (left, right) side speeds in m/s from the motor velocities"""
        fl, fr, bl, br = (self.motor_velocities[name] for name in self.cfg.motor_names)
        radius = self.cfg.wheel_diameter / 2.0
        left = 0.5 * (fl + bl) * radius / self.cfg.drive_gearing
        right = 0.5 * (fr + br) * radius / self.cfg.drive_gearing
        return left, right

    def _integrate(self, dt: float):
        v_left, v_right = self.wheel_speeds()
        v = 0.5 * (v_left + v_right)
        w = (v_right - v_left) / self.cfg.track_width

        # Midpoint heading for the translation
        x, y, theta = self.true_pose
        mid = theta + w * dt / 2.0
        self.true_pose = np.array([x + v * dt * np.cos(mid),
                                   y + v * dt * np.sin(mid),
                                   theta + w * dt])

        left_name, right_name = self.cfg.encoder_names
        self.encoder_ticks[left_name] += v_left * dt / self.cfg.distance_per_tick
        self.encoder_ticks[right_name] += v_right * dt / self.cfg.distance_per_tick

        self.gyro = np.zeros(3)
        self.gyro[self.cfg.gyro_axis] = w
        if self.gyro_noise_std > 0:
            self.gyro[self.cfg.gyro_axis] += self.rng.normal(0, self.gyro_noise_std)

    def _sample_joystick(self):
        speed_raw, rotation_raw, button = self.joystick(self.time)
        self._axes[self.cfg.speed_axis] = speed_raw
        self._axes[self.cfg.rotation_axis] = rotation_raw
        self._button = button
