import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from models.central_body import CentralBody
from simulation.results import Trajectory


def plot_trajectory(trajectory: Trajectory, body: CentralBody = None, ax=None, label="Trajectory"):
    """Plot the orbit in the x-y plane, with the central body drawn to scale."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    if body is not None:
        ax.add_patch(Circle((0.0, 0.0), body.radius, color="tab:blue", alpha=0.6, label=body.name))

    ax.plot(trajectory.x, trajectory.y, label=label)
    ax.plot(trajectory.x[0], trajectory.y[0], "o", color="tab:green")
    ax.plot(trajectory.x[-1], trajectory.y[-1], "o", color="gold")

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")
    ax.grid(True)
    ax.legend()
    return ax


def save_trajectory_plot(trajectory: Trajectory, path, body: CentralBody = None) -> None:
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_trajectory(trajectory, body=body, ax=ax)
    fig.savefig(path, dpi=120, bbox_inches="tight")
    plt.close(fig)
