# conservation_plot.py

import pandas as pd
import plotly.express as px

from analysis.orbit_metrics import compute_orbit_metrics
from simulation.results import Trajectory


def plot_conservation(trajectory: Trajectory):
    """Relative drift of specific energy and angular momentum, which RK4 should keep near zero."""
    metrics = compute_orbit_metrics(trajectory)
    energy = metrics["specific_energy"]
    h = metrics["angular_momentum"]

    df = pd.DataFrame({
        "Time": trajectory.time,
        "Energy": (energy - energy[0]) / abs(energy[0]) if energy[0] != 0 else energy - energy[0],
        "Angular momentum": (h - h[0]) / abs(h[0]) if h[0] != 0 else h - h[0],
    })
    long_df = df.melt(id_vars="Time", var_name="Quantity", value_name="Relative drift")

    fig = px.line(
        long_df, x="Time", y="Relative drift", color="Quantity",
        title="Conserved Quantities Drift",
        labels={"Time": "Time [s]"},
        template="plotly_white"
    )
    return fig
