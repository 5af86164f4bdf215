import numpy as np
from typing import Sequence

from simulation.exceptions import SingularityError


def acceleration(position: Sequence[float], mu: float) -> np.ndarray:
    """
    Gravitational acceleration produced by a point mass fixed at the origin.

        r  = sqrt(x² + y²)
        ax = -mu * x / r³
        ay = -mu * y / r³

    Args:
        position (Sequence[float]): Planar position (x, y) [m].
        mu (float): Gravitational parameter G*M [m³/s²].

    Returns:
        np.ndarray: Acceleration (ax, ay) [m/s²], shape (2,).

    Raises:
        SingularityError: If the position coincides with the attractor.
    """
    x, y = position
    r = np.sqrt(x * x + y * y)
    if r == 0.0:
        raise SingularityError(
            f"Position ({x}, {y}) coincides with the attractor, acceleration is undefined"
        )
    r3 = r ** 3
    return np.array([-mu * x / r3, -mu * y / r3], dtype=float)


def two_body_derivatives(vector: np.ndarray, mu: float) -> np.ndarray:
    """
    Right-hand side of the planar two-body problem.

    Args:
        vector (np.ndarray): [x, y, vx, vy], shape (4,).
        mu (float): Gravitational parameter [m³/s²].

    Returns:
        np.ndarray: [vx, vy, ax, ay], shape (4,).
    """
    x, y, vx, vy = vector
    ax, ay = acceleration((x, y), mu)
    return np.array([vx, vy, ax, ay], dtype=float)
