from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

import numpy as np
import pandas as pd

from models.state import State


@dataclass(frozen=True)
class Trajectory:
    """
    Ordered, read-only sequence of states produced by one integration run.

    Index `i` holds the state at time `t0 + i*dt`; index 0 is the initial
    condition exactly as configured.

    Attributes:
        states (Tuple[State, ...]): Samples, length N+1 for N steps.
        mu (Optional[float]): Gravitational parameter of the run [m³/s²].
        dt (Optional[float]): Step size of the run [s].
    """
    states: Tuple[State, ...]
    mu: Optional[float] = None
    dt: Optional[float] = None

    def __post_init__(self):
        # accept any iterable but always store an immutable tuple
        object.__setattr__(self, "states", tuple(self.states))

    def __len__(self) -> int:
        return len(self.states)

    def __getitem__(self, index: Union[int, slice]):
        return self.states[index]

    def __iter__(self) -> Iterator[State]:
        return iter(self.states)

    @property
    def n_steps(self) -> int:
        return len(self.states) - 1

    @property
    def initial_state(self) -> State:
        return self.states[0]

    @property
    def final_state(self) -> State:
        return self.states[-1]

    # ------------------------------------------------------------------
    # Column views, shape (N+1,) unless stated otherwise
    # ------------------------------------------------------------------
    @property
    def time(self) -> np.ndarray:
        """[s] Time stamps"""
        return np.array([s.t for s in self.states], dtype=float)

    @property
    def x(self) -> np.ndarray:
        return np.array([s.x for s in self.states], dtype=float)

    @property
    def y(self) -> np.ndarray:
        return np.array([s.y for s in self.states], dtype=float)

    @property
    def vx(self) -> np.ndarray:
        return np.array([s.vx for s in self.states], dtype=float)

    @property
    def vy(self) -> np.ndarray:
        return np.array([s.vy for s in self.states], dtype=float)

    @property
    def positions(self) -> np.ndarray:
        """[m] Position history, shape (N+1, 2)."""
        return self.to_array()[:, 1:3]

    @property
    def velocities(self) -> np.ndarray:
        """[m/s] Velocity history, shape (N+1, 2)."""
        return self.to_array()[:, 3:5]

    @property
    def radius(self) -> np.ndarray:
        """[m] Distance to the attractor"""
        p = self.positions
        return np.sqrt(p[:, 0] ** 2 + p[:, 1] ** 2)

    def to_array(self) -> np.ndarray:
        """
        Returns a numpy array of shape (N+1, 5):
        [t, x, y, vx, vy]
        """
        if not self.states:
            return np.empty((0, 5))
        return np.array([[s.t, s.x, s.y, s.vx, s.vy] for s in self.states], dtype=float)

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular view indexed by sample number `i`."""
        df = pd.DataFrame(self.to_array(), columns=["t", "x", "y", "vx", "vy"])
        df.index.name = "i"
        return df
