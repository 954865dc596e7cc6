from typing import List, Optional, Sequence, Tuple

from .arcadeMixer import arcade_drive
from .config import DrivetrainConfig
from .headingIntegrator import HeadingIntegrator
from .inputShaper import InputShaper
from .odometry import DifferentialDriveOdometry
from .plot import initialize_plot, draw_pose
from .robotInterface import RobotInterface
from .robotState import DriveCommand, Pose2D
from .slewLimiter import SlewLimiter
from .slowMode import SlowModeToggle


def format_pose_line(time: float, pose: Pose2D) -> str:
    """'<time>, Pose = (x, y, heading)' with 5 decimals per pose value"""
    return f"{time}, Pose = {pose}"


# ============================================================================
# TELEOPERATED DRIVETRAIN
# ============================================================================
class TeleopDrivetrain:
    """Arcade-drive teleoperation with slew limiting and dead-reckoning odometry"""
    def __init__(self, cfg: DrivetrainConfig, robot: RobotInterface, plot: bool = False):
        """
        Args:
            cfg: Drivetrain configuration
            robot: Robot runtime providing joystick, sensors and motors
            plot: Show a live matplotlib trajectory plot
        """
        self.cfg = cfg
        self.robot = robot

        self.shaper = InputShaper(cfg)
        self.slow_mode = SlowModeToggle(cfg.slow_mode_factor)
        self.limiter = SlewLimiter(cfg)
        self.heading_integrator = HeadingIntegrator(cfg)
        self.odometry = DifferentialDriveOdometry(cfg.initial_x, cfg.initial_y, cfg.initial_heading)

        self.plot = plot
        self.fig = self.ax = None
        if plot:
            self.fig, self.ax = initialize_plot()

        self.command = DriveCommand()
        self.steps = 0
        self._running = False

        print("✓ Teleop drivetrain initialized")
        print(f"  Max speed: {cfg.max_speed:.3f} m/s, max rotation: {cfg.max_rotation:.3f} rad/s")
        print(f"  Max accel: {cfg.max_accel:.2f} m/s², distance/tick: {cfg.distance_per_tick:.5f} m")

    def drive_step(self, speed_raw: float, rotation_raw: float, button: int,
                   dt: Optional[float] = None) -> DriveCommand:
        """Joystick readings -> limited wheel command for one tick"""
        speed, rotation = self.shaper.shape_axes(speed_raw, rotation_raw)
        self.slow_mode.update(button == self.cfg.slow_mode_button)
        command = self.slow_mode.apply(arcade_drive(speed, rotation))
        self.command = self.limiter.calculate(command, dt)
        return self.command

    def odometry_step(self, left_ticks: float, right_ticks: float,
                      gyro_values: Sequence[float], dt: Optional[float] = None) -> Pose2D:
        """Encoder ticks + gyro rate -> updated pose for one tick"""
        left_meters = left_ticks * self.cfg.distance_per_tick
        right_meters = right_ticks * self.cfg.distance_per_tick
        heading = self.heading_integrator.update(self.odometry.heading, gyro_values, dt)
        return self.odometry.update(heading, left_meters, right_meters)

    def wheel_velocities(self, command: DriveCommand) -> List[float]:
        """Motor velocities (rad/s) in motor_names order: FL, FR, BL, BR"""
        left = command.left * self.cfg.motor_free_speed
        right = command.right * self.cfg.motor_free_speed
        return [left, right, left, right]

    def set_motors(self, command: DriveCommand):
        for name, velocity in zip(self.cfg.motor_names, self.wheel_velocities(command)):
            self.robot.set_motor_velocity(name, velocity)

    def start(self):
        """Start teleoperation"""
        print("\n🚀 Starting teleoperation...")
        self.robot.start(self.cfg.sampling_period_ms)
        self._running = True

        try:
            self._control_loop()
        except KeyboardInterrupt:
            print("\n⚠️  Teleoperation interrupted by user")
        finally:
            self.stop()

    def _control_loop(self):
        """Main control loop, one iteration per robot step"""
        time_step = int(round(self.robot.get_basic_time_step()))
        self.set_motors(DriveCommand())
        last_time = self.robot.get_time()

        while self._running and self.robot.step(time_step) != -1:
            self.steps += 1

            # Measured period of this step, nominal period if the clock stalls
            now = self.robot.get_time()
            dt = now - last_time if now > last_time else self.cfg.dt
            last_time = now

            command = self.drive_step(
                self.robot.get_axis_value(self.cfg.speed_axis),
                self.robot.get_axis_value(self.cfg.rotation_axis),
                self.robot.get_pressed_button(),
                dt,
            )
            self.set_motors(command)

            left_name, right_name = self.cfg.encoder_names
            pose = self.odometry_step(
                self.robot.get_encoder_value(left_name),
                self.robot.get_encoder_value(right_name),
                self.robot.get_gyro_values(),
                dt,
            )
            print(format_pose_line(now, pose))

            if self.plot:
                draw_pose(self.ax, self.odometry, getattr(self.robot, 'true_pose', None))

            if self.cfg.max_steps and self.steps >= self.cfg.max_steps:
                print(f"\n⏱️  Max steps ({self.cfg.max_steps}) reached")
                break

    def stop(self):
        """Stop motors and cleanup"""
        print("\n🛑 Stopping drivetrain...")
        self._running = False
        self.set_motors(DriveCommand())
        self.limiter.reset()
        self.robot.stop()
        print(f"✓ Stopped after {self.steps} steps, final pose {self.odometry.pose}")

    def get_pose(self) -> Tuple[float, float, float]:
        return self.odometry.get_pose()
