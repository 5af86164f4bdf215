# simulation/integrators/step.py

from typing import Optional

from models.state import State
from models.two_body import two_body_derivatives


def rk4_step(state: State, dt: float, mu: float, t_next: Optional[float] = None) -> State:
    """
    Single-step propagation with the classical fourth-order Runge-Kutta scheme.

    Stages are evaluated at the start (k1), twice at the half step (k2, k3)
    and at the full step (k4):

        k1 = f(y)
        k2 = f(y + 0.5*dt*k1)
        k3 = f(y + 0.5*dt*k2)
        k4 = f(y + dt*k3)
        y_next = y + dt/6 * (k1 + 2*k2 + 2*k3 + k4)

    Args:
        state (State): Current state.
        dt (float): Step size [s].
        mu (float): Gravitational parameter [m³/s²].
        t_next (Optional[float]): Time stamp of the returned state. Defaults
            to `state.t + dt`; the runner passes its precomputed grid value.

    Returns:
        State: State advanced by one step.

    Raises:
        SingularityError: If any stage lands on the attractor.
    """
    y = state.state_vector

    k1 = two_body_derivatives(y, mu)
    k2 = two_body_derivatives(y + 0.5 * dt * k1, mu)
    k3 = two_body_derivatives(y + 0.5 * dt * k2, mu)
    k4 = two_body_derivatives(y + dt * k3, mu)

    y_next = y + (dt / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)

    if t_next is None:
        t_next = state.t + dt
    return State.from_vector(t_next, y_next)
