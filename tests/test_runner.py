import dataclasses

import numpy as np
import pytest

from analysis import estimate_period, orbital_period
from models.central_body import EARTH
from models.state import State
from simulation.config import SimulationParams
from simulation.exceptions import ConfigurationError, SingularityError
from simulation.integrators import rk4_step
from simulation.runner import TwoBodyRunner, run_simulation, time_grid


@pytest.fixture
def circular_setup():
    r0 = 7.0e6
    v0 = np.sqrt(EARTH.mu / r0)
    initial = State(t=0.0, x=r0, y=0.0, vx=0.0, vy=v0)
    return initial, r0


@pytest.mark.parametrize("n_steps", [1, 2, 10, 257])
def test_trajectory_length(n_steps):
    initial = State(t=0.0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3)
    traj = run_simulation(initial, 1.0, n_steps, EARTH.mu)
    assert len(traj) == n_steps + 1
    assert traj.n_steps == n_steps


def test_zero_steps_yields_initial_state_only():
    initial = State(t=3.0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3)
    traj = run_simulation(initial, 1.0, 0, EARTH.mu)
    assert len(traj) == 1
    assert traj[0] == initial


@pytest.mark.parametrize("bad", [-1, 2.5, True])
def test_invalid_step_count_rejected(bad):
    initial = State(t=0.0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3)
    with pytest.raises(ConfigurationError):
        run_simulation(initial, 1.0, bad, EARTH.mu)


def test_zero_steps_still_validates_dt():
    initial = State(t=0.0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3)
    with pytest.raises(ConfigurationError):
        run_simulation(initial, 0.0, 0, EARTH.mu)


def test_initial_state_is_unmodified():
    initial = State(t=0.1, x=7.123456789e6, y=-1.0e-3, vx=1.0e-7, vy=7.7e3)
    traj = run_simulation(initial, 0.1, 5, EARTH.mu)
    assert traj[0] is initial


def test_time_grid_is_exact():
    t0, dt, n = 12.5, 0.1, 2000
    initial = State(t=t0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3)
    traj = run_simulation(initial, dt, n, EARTH.mu)
    for i, s in enumerate(traj):
        assert s.t == t0 + i * dt


def test_time_grid_function():
    grid = time_grid(1.0, 0.1, 10)
    assert grid.shape == (11,)
    assert grid[0] == 1.0
    assert grid[10] == 1.0 + 10 * 0.1


def test_each_state_is_one_step_of_the_previous():
    initial = State(t=0.0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3)
    dt = 5.0
    traj = run_simulation(initial, dt, 50, EARTH.mu)
    for prev, nxt in zip(traj[:-1], traj[1:]):
        expected = rk4_step(prev, dt, EARTH.mu)
        assert (nxt.x, nxt.y, nxt.vx, nxt.vy) == (expected.x, expected.y, expected.vx, expected.vy)


def test_runs_are_deterministic():
    params = SimulationParams(mu=EARTH.mu, dt=2.0, steps=500,
                              initial_state=State(t=0.0, x=7.0e6, y=1.0e5, vx=-50.0, vy=7.9e3))
    a = TwoBodyRunner(params).run()
    b = TwoBodyRunner(params).run()
    assert np.array_equal(a.to_array(), b.to_array())


def test_iter_states_is_restartable():
    params = SimulationParams(mu=EARTH.mu, dt=1.0, steps=20)
    runner = TwoBodyRunner(params)
    first = list(runner.iter_states())
    second = list(runner.iter_states())
    assert first == second
    assert len(first) == 21


def test_zero_force_motion_is_linear():
    initial = State(t=0.0, x=1000.0, y=-500.0, vx=3.0, vy=-4.5)
    dt = 0.5
    traj = run_simulation(initial, dt, 200, mu=0.0)

    i = np.arange(len(traj))
    expected_x = initial.x + i * dt * initial.vx
    expected_y = initial.y + i * dt * initial.vy

    assert np.allclose(traj.x, expected_x, rtol=1e-12, atol=1e-9)
    assert np.allclose(traj.y, expected_y, rtol=1e-12, atol=1e-9)
    assert np.all(traj.vx == initial.vx)
    assert np.all(traj.vy == initial.vy)


def test_circular_orbit_keeps_radius(circular_setup):
    initial, r0 = circular_setup
    period = orbital_period(EARTH.mu, r0)
    dt = 10.0
    steps = int(1.2 * period / dt)

    traj = run_simulation(initial, dt, steps, EARTH.mu)
    rel = np.abs(traj.radius - r0) / r0
    assert rel.max() < 1e-3


def test_circular_orbit_period(circular_setup):
    initial, r0 = circular_setup
    period = orbital_period(EARTH.mu, r0)
    dt = 10.0
    steps = int(1.2 * period / dt)

    traj = run_simulation(initial, dt, steps, EARTH.mu)
    estimated = estimate_period(traj)
    assert estimated is not None
    assert abs(estimated - period) / period < 0.02


def test_trajectory_records_run_parameters():
    params = SimulationParams(mu=EARTH.mu, dt=0.25, steps=4)
    traj = TwoBodyRunner(params).run()
    assert traj.mu == EARTH.mu
    assert traj.dt == 0.25
    assert traj.final_state.t == 1.0


def test_singularity_aborts_run():
    # radial fall onto the attractor with a step that lands exactly on it
    initial = State(t=0.0, x=-10.0, y=0.0, vx=10.0, vy=0.0)
    with pytest.raises(SingularityError):
        run_simulation(initial, 0.5, 10, mu=0.0)


def test_trajectory_is_read_only():
    traj = run_simulation(State(t=0.0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3), 1.0, 3, EARTH.mu)
    assert isinstance(traj.states, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        traj.states = ()


if __name__ == "__main__":
    pytest.main([__file__])
