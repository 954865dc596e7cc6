from abc import ABC, abstractmethod
from typing import Tuple


class RobotInterface(ABC):
    """Abstract base class for the robot runtime (simulator or hardware)"""
    @abstractmethod
    def start(self, sampling_period_ms: int):
        """Enable the joystick, encoders and gyro"""
        pass

    @abstractmethod
    def stop(self):
        """Stop and cleanup the robot"""
        pass

    @abstractmethod
    def step(self, time_step_ms: int) -> int:
        """
        Advance the runtime by one control step.

        Returns: -1 once the runtime is shutting down
        """
        pass

    @abstractmethod
    def get_time(self) -> float:
        """Current runtime clock (seconds)"""
        pass

    @abstractmethod
    def get_basic_time_step(self) -> float:
        """Basic step length (milliseconds)"""
        pass

    @abstractmethod
    def get_axis_value(self, axis: int) -> int:
        """Raw joystick axis reading, roughly [-32768, 32768]"""
        pass

    @abstractmethod
    def get_pressed_button(self) -> int:
        """Joystick button currently held, -1 if none"""
        pass

    @abstractmethod
    def get_encoder_value(self, name: str) -> float:
        """Cumulative encoder reading in ticks"""
        pass

    @abstractmethod
    def get_gyro_values(self) -> Tuple[float, float, float]:
        """Angular velocity vector (rad/s)"""
        pass

    @abstractmethod
    def set_motor_velocity(self, name: str, velocity: float):
        """Command a motor angular velocity (rad/s)"""
        pass
