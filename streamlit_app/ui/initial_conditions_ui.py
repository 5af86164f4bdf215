import streamlit as st

from models.state import State
from simulation.config import DEFAULTS


def get_initial_conditions() -> State:
    """
    Generate Streamlit UI elements to gather the initial state.

    Positions are entered in units of 10⁶ m and velocities in km/s, then
    converted to SI.

    Returns:
        State: Initial state at t0.
    """
    st.subheader("Initial Conditions")

    x0 = st.number_input("Initial x [×10⁶ m]", value=DEFAULTS["x0"] / 1e6, step=0.1, format="%.3f")
    y0 = st.number_input("Initial y [×10⁶ m]", value=DEFAULTS["y0"] / 1e6, step=0.1, format="%.3f")
    vx0 = st.number_input("Initial vx [km/s]", value=DEFAULTS["vx0"] / 1e3, step=0.1, format="%.3f")
    vy0 = st.number_input("Initial vy [km/s]", value=DEFAULTS["vy0"] / 1e3, step=0.1, format="%.3f")
    t0 = st.number_input("Start time t0 [s]", value=DEFAULTS["t0"])

    return State(t=t0, x=x0 * 1e6, y=y0 * 1e6, vx=vx0 * 1e3, vy=vy0 * 1e3)
