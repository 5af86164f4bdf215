# simulation/runner.py

import logging
from typing import Iterator

import numpy as np

from models.state import State
from simulation.config import SimulationParams
from simulation.exceptions import ConfigurationError
from simulation.integrators import rk4_step
from simulation.results import Trajectory

logger = logging.getLogger(__name__)

# progress is reported at DEBUG level every this many steps
PROGRESS_EVERY = 50000


def time_grid(t0: float, dt: float, step_count: int) -> np.ndarray:
    """
    Fixed time grid t[i] = t0 + i*dt for i in 0..step_count (inclusive).

    Each sample is computed from its index, never accumulated.
    """
    return t0 + np.arange(step_count + 1, dtype=float) * dt


class TwoBodyRunner:
    """
    Fixed-step two-body integration driver.

    Owns the time grid, calls the RK4 stepper `steps` times and assembles
    the resulting trajectory. The run always goes to completion: there is no
    early termination and no plausibility check on the state.

    Example usage:
        runner = TwoBodyRunner(SimulationParams(mu=EARTH.mu, dt=0.1, steps=1000))
        trajectory = runner.run()
    """

    def __init__(self, params: SimulationParams):
        self.params = params

    def iter_states(self) -> Iterator[State]:
        """
        Lazily yield the N+1 states of the run, starting with the initial state.

        Each call restarts the integration from the initial condition.
        """
        p = self.params
        grid = time_grid(p.t0, p.dt, p.steps)

        state = p.initial_state
        yield state

        for i in range(p.steps):
            state = rk4_step(state, p.dt, p.mu, t_next=grid[i + 1])
            if (i + 1) % PROGRESS_EVERY == 0:
                logger.debug("step %d/%d t=%.3f r=%.3f", i + 1, p.steps, state.t, state.radius)
            yield state

    def run(self) -> Trajectory:
        p = self.params
        logger.info(
            "Integrating %d steps of %g s from t0=%g (mu=%.6e)", p.steps, p.dt, p.t0, p.mu
        )
        trajectory = Trajectory(states=tuple(self.iter_states()), mu=p.mu, dt=p.dt)
        logger.info(
            "Integration done: %d samples, final r=%.3f m", len(trajectory), trajectory.final_state.radius
        )
        return trajectory


def run_simulation(initial_state: State, dt: float, step_count: int, mu: float) -> Trajectory:
    """
    Integrate `step_count` RK4 steps from `initial_state`.

    Unlike `SimulationParams`, a step count of zero is accepted and yields a
    trajectory holding only the initial state.

    Args:
        initial_state (State): Seed state, kept unmodified at index 0.
        dt (float): Step size [s].
        step_count (int): Number of steps, >= 0.
        mu (float): Gravitational parameter [m³/s²].

    Returns:
        Trajectory: step_count + 1 states.

    Raises:
        ConfigurationError: On invalid step size, step count or mu.
        SingularityError: If the body reaches the attractor.
    """
    if isinstance(step_count, bool) or not isinstance(step_count, (int, np.integer)):
        raise ConfigurationError(f"step_count must be an integer, got {step_count!r}")
    if step_count < 0:
        raise ConfigurationError(f"step_count must be non-negative, got {step_count!r}")

    if step_count == 0:
        # validate the remaining inputs the same way a full run would
        SimulationParams(mu=mu, dt=dt, steps=1, initial_state=initial_state)
        return Trajectory(states=(initial_state,), mu=mu, dt=dt)

    params = SimulationParams(mu=mu, dt=dt, steps=int(step_count), initial_state=initial_state)
    return TwoBodyRunner(params).run()
