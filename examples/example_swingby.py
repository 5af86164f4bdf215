# examples/example_swingby.py

import os

import matplotlib.pyplot as plt

from analysis import orbital_period, semi_major_axis, summarize
from analysis.preview import plot_trajectory
from models.central_body import EARTH
from simulation.config import SimulationParams
from simulation.export import write_csv
from simulation.runner import TwoBodyRunner

HERE = os.path.dirname(os.path.abspath(__file__))

# ---------------------------------------------------------
# 1) Reference run from the YAML file
# ---------------------------------------------------------
params = SimulationParams.from_yaml(os.path.join(HERE, "swingby.yaml"))
trajectory = TwoBodyRunner(params).run()
write_csv(trajectory, "swingby.csv")

s0 = params.initial_state
a = semi_major_axis(params.mu, s0.radius, s0.speed)
summary = summarize(trajectory)
print(f"Samples:            {len(trajectory)}")
print(f"Perigee / apogee:   {summary['r_min']:.0f} m / {summary['r_max']:.0f} m")
print(f"Kepler period:      {orbital_period(params.mu, a):.2f} s")
print(f"Estimated period:   {summary['period_estimate']:.2f} s")
print(f"Energy drift:       {summary['energy_drift']:.3e}")

# ---------------------------------------------------------
# 2) Escape speed sweep: same start, increasing speed
# ---------------------------------------------------------
fig, ax = plt.subplots(figsize=(9, 9))
for vy0 in (7.5e3, 8.5e3, 9.5e3, 10.7e3, 12.0e3):
    sweep = SimulationParams.from_dict({"vy0": vy0, "dt": 1.0, "steps": 20000})
    plot_trajectory(TwoBodyRunner(sweep).run(), ax=ax, label=f"vy0 = {vy0 / 1e3:.1f} km/s")

plot_trajectory(trajectory, body=EARTH, ax=ax, label="reference")
ax.set_xlim(-1.2e8, 1.2e8)
ax.set_ylim(-1.2e8, 1.2e8)
plt.show()
