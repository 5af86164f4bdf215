# analysis/orbit_metrics.py

from typing import Dict, Optional

import numpy as np

from simulation.results import Trajectory


def _resolve_mu(trajectory: Trajectory, mu: Optional[float]) -> float:
    if mu is None:
        mu = trajectory.mu
    if mu is None:
        raise ValueError("Orbit metrics require mu, either passed in or stored on the trajectory.")
    return float(mu)


def orbital_period(mu: float, a: float) -> float:
    """[s] Keplerian period of a bound orbit with semi-major axis `a` [m]."""
    return 2.0 * np.pi * np.sqrt(a ** 3 / mu)


def semi_major_axis(mu: float, r: float, v: float) -> float:
    """
    [m] Semi-major axis from the vis-viva equation.

    Negative for hyperbolic states, infinite for a parabolic one.
    """
    inv_a = 2.0 / r - v * v / mu
    if inv_a == 0.0:
        return np.inf
    return 1.0 / inv_a


def compute_orbit_metrics(trajectory: Trajectory, mu: Optional[float] = None) -> Dict[str, np.ndarray]:
    """
    Compute conserved-quantity time series from an integrated trajectory.

    Parameters
    ----------
    trajectory : Trajectory
        Output of a simulation run.
    mu : float, optional
        Gravitational parameter [m³/s²]. Defaults to ``trajectory.mu``.

    Returns
    -------
    Dict[str, np.ndarray]
        - ``radius``            : distance to the attractor [m]
        - ``speed``             : velocity magnitude [m/s]
        - ``specific_energy``   : v²/2 - mu/r [J/kg]
        - ``angular_momentum``  : x*vy - y*vx [m²/s]

    Raises
    ------
    ValueError
        If no gravitational parameter is available.

    Notes
    -----
    For the exact two-body flow both ``specific_energy`` and
    ``angular_momentum`` are constant; their drift measures integration error.
    """
    mu = _resolve_mu(trajectory, mu)
    arr = trajectory.to_array()
    x, y, vx, vy = arr[:, 1], arr[:, 2], arr[:, 3], arr[:, 4]

    radius = np.sqrt(x ** 2 + y ** 2)
    speed = np.sqrt(vx ** 2 + vy ** 2)
    with np.errstate(divide="ignore"):
        specific_energy = 0.5 * speed ** 2 - mu / radius

    return {
        "radius": radius,
        "speed": speed,
        "specific_energy": specific_energy,
        "angular_momentum": x * vy - y * vx,
    }


def estimate_period(trajectory: Trajectory) -> Optional[float]:
    """
    Estimate the orbital period from the swept polar angle.

    Returns the (linearly interpolated) time at which the body has swept
    one full revolution around the origin, measured from the first sample,
    or None if the trajectory covers less than one revolution.
    """
    if len(trajectory) < 2:
        return None

    t = trajectory.time
    theta = np.unwrap(np.arctan2(trajectory.y, trajectory.x))
    swept = np.abs(theta - theta[0])

    crossed = np.nonzero(swept >= 2.0 * np.pi)[0]
    if crossed.size == 0:
        return None
    k = crossed[0]
    # k >= 1 since swept[0] == 0
    frac = (2.0 * np.pi - swept[k - 1]) / (swept[k] - swept[k - 1])
    return float(t[k - 1] + frac * (t[k] - t[k - 1]) - t[0])


def summarize(trajectory: Trajectory, mu: Optional[float] = None) -> Dict[str, Optional[float]]:
    """Scalar summary used by the command line and the interactive page."""
    metrics = compute_orbit_metrics(trajectory, mu)
    energy = metrics["specific_energy"]
    h = metrics["angular_momentum"]

    def rel_drift(series: np.ndarray) -> float:
        ref = series[0]
        if ref == 0.0:
            return float(np.max(np.abs(series - ref)))
        return float(np.max(np.abs((series - ref) / ref)))

    return {
        "duration": float(trajectory.time[-1] - trajectory.time[0]),
        "r_min": float(metrics["radius"].min()),
        "r_max": float(metrics["radius"].max()),
        "energy_drift": rel_drift(energy),
        "angular_momentum_drift": rel_drift(h),
        "period_estimate": estimate_period(trajectory),
    }
