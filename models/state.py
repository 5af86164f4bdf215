from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class State:
    """
    Planar state of the simulated body at one discrete instant.

    State vector layout (4):
        x   - Position along the x axis [m]
        y   - Position along the y axis [m]
        vx  - Velocity along the x axis [m/s]
        vy  - Velocity along the y axis [m/s]

    The time stamp `t` [s] is carried alongside but is not part of the
    integrated vector.
    """

    t: float  # [s] Time
    x: float  # [m] Position x
    y: float  # [m] Position y
    vx: float  # [m/s] Velocity x
    vy: float  # [m/s] Velocity y

    @property
    def position(self) -> np.ndarray:
        """[m] Position vector, shape (2,)"""
        return np.array([self.x, self.y], dtype=float)

    @property
    def velocity(self) -> np.ndarray:
        """[m/s] Velocity vector, shape (2,)"""
        return np.array([self.vx, self.vy], dtype=float)

    @property
    def state_vector(self) -> np.ndarray:
        """Integrated vector [x, y, vx, vy], shape (4,)."""
        return np.array([self.x, self.y, self.vx, self.vy], dtype=float)

    @property
    def radius(self) -> float:
        """[m] Distance to the attractor at the origin"""
        return float(np.sqrt(self.x * self.x + self.y * self.y))

    @property
    def speed(self) -> float:
        """[m/s] Velocity magnitude"""
        return float(np.sqrt(self.vx * self.vx + self.vy * self.vy))

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite([self.t, self.x, self.y, self.vx, self.vy])))

    @classmethod
    def from_vector(cls, t: float, vector: np.ndarray) -> "State":
        """
        Build a state from an integrated vector.

        Args:
            t (float): Time stamp [s].
            vector (np.ndarray): [x, y, vx, vy], shape (4,).

        Returns:
            State: New state holding plain Python floats.
        """
        x, y, vx, vy = (float(v) for v in vector)
        return cls(t=float(t), x=x, y=y, vx=vx, vy=vy)

    def to_dict(self) -> dict:
        return dict(t=self.t, x=self.x, y=self.y, vx=self.vx, vy=self.vy)
