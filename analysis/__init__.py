from .orbit_metrics import (
    compute_orbit_metrics,
    estimate_period,
    orbital_period,
    semi_major_axis,
    summarize,
)

__all__ = [
    "compute_orbit_metrics",
    "estimate_period",
    "orbital_period",
    "semi_major_axis",
    "summarize",
]
