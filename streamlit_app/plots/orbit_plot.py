# orbit_plot.py

from typing import Optional

import numpy as np
import plotly.graph_objects as go

from models.central_body import CentralBody
from simulation.results import Trajectory


def plot_orbit(trajectory: Trajectory, body: Optional[CentralBody] = None, current: Optional[int] = None):
    """Plot the x-y path with the central body to scale and an optional current-sample marker."""
    fig = go.Figure()

    if body is not None:
        theta = np.linspace(0.0, 2.0 * np.pi, 181)
        fig.add_trace(go.Scatter(
            x=body.radius * np.cos(theta), y=body.radius * np.sin(theta),
            fill="toself", name=body.name, line=dict(color="royalblue"),
        ))

    fig.add_trace(go.Scatter(x=trajectory.x, y=trajectory.y, mode="lines", name="Trajectory"))

    if current is not None:
        s = trajectory[current]
        fig.add_trace(go.Scatter(
            x=[s.x], y=[s.y], mode="markers", name=f"t = {s.t:.1f} s",
            marker=dict(size=10, color="gold", line=dict(color="white", width=2)),
        ))

    fig.update_layout(
        title="Trajectory (x-y plane)",
        xaxis_title="x [m]",
        yaxis_title="y [m]",
        yaxis=dict(scaleanchor="x", scaleratio=1),
        legend=dict(x=0, y=1.1, orientation="h"),
        template="plotly_white"
    )
    return fig
