import io

import numpy as np
import pytest

from models.central_body import EARTH
from models.state import State
from simulation.exceptions import OutputError
from simulation.export import CSV_HEADER, read_csv, write_csv
from simulation.results import Trajectory
from simulation.runner import run_simulation


@pytest.fixture
def short_trajectory():
    initial = State(t=0.0, x=7.0e6, y=0.0, vx=0.0, vy=7.7e3)
    return run_simulation(initial, 0.1, 20, EARTH.mu)


def test_header_and_row_count(tmp_path, short_trajectory):
    path = tmp_path / "swingby.csv"
    write_csv(short_trajectory, path)

    lines = path.read_text().splitlines()
    assert lines[0] == "i,t,x,y,vx,vy"
    assert len(lines) == len(short_trajectory) + 1
    for line in lines[1:]:
        assert len(line.split(",")) == 6


def test_rows_are_indexed_and_fixed_point(short_trajectory):
    buffer = io.StringIO()
    write_csv(short_trajectory, buffer)
    rows = buffer.getvalue().splitlines()[1:]

    assert rows[0] == "0,0.000000,7000000.000000,0.000000,0.000000,7700.000000"
    assert [int(r.split(",")[0]) for r in rows] == list(range(len(short_trajectory)))
    assert rows[-1].startswith("20,2.000000,")


def test_custom_precision():
    traj = Trajectory(states=(State(t=0.5, x=1.0, y=2.0, vx=3.0, vy=4.0),))
    buffer = io.StringIO()
    write_csv(traj, buffer, precision=2)
    assert buffer.getvalue() == "i,t,x,y,vx,vy\n0,0.50,1.00,2.00,3.00,4.00\n"


def test_negative_precision_rejected(short_trajectory):
    with pytest.raises(ValueError):
        write_csv(short_trajectory, io.StringIO(), precision=-1)


def test_unopenable_destination_raises(tmp_path, short_trajectory):
    with pytest.raises(OutputError):
        write_csv(short_trajectory, tmp_path / "missing_dir" / "out.csv")


def test_directory_destination_raises(tmp_path, short_trajectory):
    with pytest.raises(OutputError):
        write_csv(short_trajectory, tmp_path)


def test_output_error_keeps_cause(tmp_path, short_trajectory):
    with pytest.raises(OutputError) as excinfo:
        write_csv(short_trajectory, tmp_path / "missing_dir" / "out.csv")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_read_back_written_file(tmp_path, short_trajectory):
    path = tmp_path / "swingby.csv"
    write_csv(short_trajectory, path)
    parsed = read_csv(path)

    assert len(parsed) == len(short_trajectory)
    assert np.allclose(parsed.to_array(), short_trajectory.to_array(), rtol=0.0, atol=1e-6)


@pytest.mark.parametrize("content", [
    "i,t,x,v\n0,0,1,2,3,4\n",
    "i,t,x,y,vx,vy\n0,0,1,2,3\n",
    "i,t,x,y,vx,vy\n1,0,1,2,3,4\n",
])
def test_read_rejects_malformed_content(content):
    with pytest.raises(ValueError):
        read_csv(io.StringIO(content))


def test_read_missing_file(tmp_path):
    with pytest.raises(OutputError):
        read_csv(tmp_path / "nope.csv")


def test_header_constant():
    assert CSV_HEADER == ("i", "t", "x", "y", "vx", "vy")


if __name__ == "__main__":
    pytest.main([__file__])
