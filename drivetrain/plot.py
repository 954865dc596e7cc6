import matplotlib.pyplot as plt
import numpy as np


# ============================================================================
# VISUALIZATION
# ============================================================================
def initialize_plot():
    """Initialize matplotlib figure for the odometry trajectory"""
    plt.ion()
    fig, ax = plt.subplots(1, 1, figsize=(7, 6))

    ax.set_xlim(-5, 5)
    ax.set_ylim(-5, 5)
    ax.set_aspect('equal')
    ax.grid(True)
    ax.set_title('Dead-Reckoning Odometry')

    return fig, ax


def draw_pose(ax, odometry, true_pose=None):
    """
    Redraw the trajectory and heading arrow

    Heading convention: 90° points along +Y, so the arrow direction is
    (cos(heading), sin(heading)) in the world frame.
    """
    ax.clear()
    ax.set_xlim(-5, 5)
    ax.set_ylim(-5, 5)
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    ax.set_title(f'Odometry (Heading: {odometry.heading:.1f}°)')

    if len(odometry.trajectory_x) > 1:
        ax.plot(odometry.trajectory_x, odometry.trajectory_y,
                'b-', alpha=0.5, linewidth=1, label='Path')

    ax.plot(odometry.x, odometry.y, 'bo', markersize=10, label='Robot', zorder=10)

    arrow_len = 0.5
    theta = np.radians(odometry.heading)
    ax.arrow(odometry.x, odometry.y,
             arrow_len * np.cos(theta), arrow_len * np.sin(theta),
             head_width=0.2, head_length=0.15,
             fc='green', ec='green', linewidth=2, zorder=11)

    if true_pose is not None:
        ax.plot(true_pose[0], true_pose[1], 'rx', markersize=10, label='Truth')

    ax.legend(loc='upper right')
    plt.pause(0.001)
