import io

import streamlit as st

from analysis.orbit_metrics import summarize
from simulation.exceptions import ConfigurationError, SingularityError
from simulation.export import write_csv
from simulation.runner import run_simulation

from ui.initial_conditions_ui import get_initial_conditions
from ui.simulation_ui import get_central_body, get_step_parameters
from plots.orbit_plot import plot_orbit
from plots.state_plot import plot_states
from plots.conservation_plot import plot_conservation

st.set_page_config(page_title="Swingby Trajectory Simulator", layout="wide")
st.title("Swingby Trajectory Simulator")
st.markdown("""
Fixed-step RK4 integration of a body around a single point-mass attractor.

- 👉 Set the central body, initial conditions and step size in the sidebar.
- ⚙️ Press **Run Simulation**.
- 📈 Scrub through the result and download it as CSV.
""")

with st.sidebar:
    body = get_central_body()
    initial_state = get_initial_conditions()
    dt, steps = get_step_parameters()
    run_clicked = st.button("Run Simulation")

if run_clicked:
    try:
        with st.spinner("Integrating..."):
            st.session_state["trajectory"] = run_simulation(initial_state, dt, steps, body.mu)
            st.session_state["body"] = body
    except (ConfigurationError, SingularityError) as exc:
        st.session_state.pop("trajectory", None)
        st.error(str(exc))

trajectory = st.session_state.get("trajectory")

if trajectory is None:
    st.info("Configure the run in the sidebar, then press Run Simulation.")
    st.stop()

st.success(f"Simulation complete: {len(trajectory)} samples.")

current = st.slider("Sample", 0, len(trajectory) - 1, len(trajectory) - 1)
s = trajectory[current]

cols = st.columns(6)
cols[0].metric("Time", f"{s.t:.1f} s")
cols[1].metric("x", f"{s.x / 1e6:.3f} ×10⁶ m")
cols[2].metric("y", f"{s.y / 1e6:.3f} ×10⁶ m")
cols[3].metric("vx", f"{s.vx:.1f} m/s")
cols[4].metric("vy", f"{s.vy:.1f} m/s")
cols[5].metric("r", f"{s.radius / 1e6:.3f} ×10⁶ m")

st.plotly_chart(plot_orbit(trajectory, st.session_state.get("body"), current=current), use_container_width=True)

summary = summarize(trajectory)
st.subheader("Orbit Summary")
st.write({k: v for k, v in summary.items()})

st.plotly_chart(plot_states(trajectory), use_container_width=True)
st.plotly_chart(plot_conservation(trajectory), use_container_width=True)

st.subheader("Samples")
st.dataframe(trajectory.to_dataframe())

buffer = io.StringIO()
write_csv(trajectory, buffer)
st.download_button("Download CSV", buffer.getvalue(), file_name="swingby.csv", mime="text/csv")
