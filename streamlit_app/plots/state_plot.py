# state_plot.py

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from simulation.results import Trajectory


def plot_states(trajectory: Trajectory):
    """Plot position, velocity and radius over time using Plotly."""
    t = trajectory.time

    fig = make_subplots(rows=3, cols=1, shared_xaxes=True,
                        subplot_titles=("Position", "Velocity", "Radius"))
    fig.add_trace(go.Scatter(x=t, y=trajectory.x, name="x"), row=1, col=1)
    fig.add_trace(go.Scatter(x=t, y=trajectory.y, name="y"), row=1, col=1)
    fig.add_trace(go.Scatter(x=t, y=trajectory.vx, name="vx"), row=2, col=1)
    fig.add_trace(go.Scatter(x=t, y=trajectory.vy, name="vy"), row=2, col=1)
    fig.add_trace(go.Scatter(x=t, y=trajectory.radius, name="r"), row=3, col=1)

    fig.update_yaxes(title_text="[m]", row=1, col=1)
    fig.update_yaxes(title_text="[m/s]", row=2, col=1)
    fig.update_yaxes(title_text="[m]", row=3, col=1)
    fig.update_xaxes(title_text="Time [s]", row=3, col=1)
    fig.update_layout(
        title="State Variables Over Time",
        height=800,
        legend=dict(x=0, y=1.1, orientation="h"),
        template="plotly_white"
    )
    return fig
