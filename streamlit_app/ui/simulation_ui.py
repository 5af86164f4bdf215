import streamlit as st

from models.central_body import BODY_REGISTRY, CentralBody


def get_central_body() -> CentralBody:
    st.subheader("Central Body")
    name = st.selectbox("Attractor", sorted(BODY_REGISTRY))
    body = BODY_REGISTRY[name]
    st.caption(f"μ = G·M = {body.mu:.6e} m³/s²")
    return body


def get_step_parameters():
    """Return (dt [s], steps) from the sidebar widgets."""
    st.subheader("Integration")
    dt = st.number_input("Time step dt [s]", min_value=0.001, value=1.0, step=0.1)
    steps = st.number_input("Number of steps", min_value=1, max_value=2_000_000, value=20000, step=1000)
    return float(dt), int(steps)
