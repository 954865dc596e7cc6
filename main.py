"""
Teleoperated Differential Drivetrain - Simulation Demo
Arcade drive with input shaping, slow mode and acceleration limiting,
plus dead-reckoning odometry from wheel encoders and gyro
"""
from drivetrain.config import DrivetrainConfig
from drivetrain.simulatedRobot import SimulatedRobot
from drivetrain.teleopDrivetrain import TeleopDrivetrain


def demo_joystick(t: float):
    """Scripted driver: forward, slow-mode turn, forward again, stop"""
    if t < 2.0:
        return -32768, 0, -1           # full forward (axis is inverted)
    if t < 2.1:
        return 0, 0, 1                 # tap slow mode on
    if t < 4.0:
        return -32768, -16384, -1      # forward while turning
    if t < 4.1:
        return 0, 0, 1                 # tap slow mode off
    if t < 6.0:
        return -20000, 0, -1
    return 0, 0, -1


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================
def main(plot: bool = False):
    """Run the scripted teleop demo on the simulated robot"""
    print("=" * 60)
    print("TELEOP DIFFERENTIAL DRIVETRAIN - Simulation")
    print("=" * 60)

    cfg = DrivetrainConfig()
    robot = SimulatedRobot(cfg, demo_joystick, basic_time_step=32, duration=7.0)

    drivetrain = TeleopDrivetrain(cfg, robot, plot=plot)
    drivetrain.start()

    x, y, _ = robot.true_pose
    print("\n✅ Run completed!")
    print(f"Odometry pose: {drivetrain.odometry.pose}")
    print(f"True position: ({x:.5f}, {y:.5f})")


if __name__ == "__main__":
    main()
