"""
CSV export of a trajectory.

Format: header ``i,t,x,y,vx,vy`` followed by one row per sample, floats in
fixed-point notation (6 decimals by default).
"""

import csv
import logging
from pathlib import Path
from typing import IO, Union

from models.state import State
from simulation.exceptions import OutputError
from simulation.results import Trajectory

logger = logging.getLogger(__name__)

CSV_HEADER = ("i", "t", "x", "y", "vx", "vy")

Destination = Union[str, Path, IO[str]]


def _write_rows(f: IO[str], trajectory: Trajectory, precision: int) -> int:
    fmt = f"{{:.{precision}f}}"
    w = csv.writer(f, lineterminator="\n")
    w.writerow(CSV_HEADER)
    for i, s in enumerate(trajectory):
        w.writerow([i, fmt.format(s.t), fmt.format(s.x), fmt.format(s.y),
                    fmt.format(s.vx), fmt.format(s.vy)])
    return len(trajectory)


def write_csv(trajectory: Trajectory, destination: Destination, precision: int = 6) -> None:
    """
    Write a trajectory as comma-separated text.

    Args:
        trajectory (Trajectory): Samples to write.
        destination: File path, or an open text stream (left open).
        precision (int): Number of decimals for floating point columns.

    Raises:
        OutputError: If the destination cannot be opened or written.
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    if hasattr(destination, "write"):
        try:
            n = _write_rows(destination, trajectory, precision)
        except OSError as exc:
            raise OutputError(f"Cannot write trajectory: {exc}") from exc
        logger.info("Wrote %d samples to stream", n)
        return

    path = Path(destination)
    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            n = _write_rows(f, trajectory, precision)
    except OSError as exc:
        raise OutputError(f"Cannot write trajectory to {path}: {exc}") from exc
    logger.info("Wrote %d samples to %s", n, path)


def read_csv(source: Destination) -> Trajectory:
    """
    Parse a file written by `write_csv` back into a trajectory.

    The sample index column is checked for continuity; `mu` and `dt` are
    not stored in the file and are left unset.

    Raises:
        OutputError: If the source cannot be read.
        ValueError: If the content does not follow the expected layout.
    """
    if hasattr(source, "read"):
        return _parse(source)
    try:
        with open(source, "r", newline="", encoding="utf-8") as f:
            return _parse(f)
    except OSError as exc:
        raise OutputError(f"Cannot read trajectory from {source}: {exc}") from exc


def _parse(f: IO[str]) -> Trajectory:
    reader = csv.reader(f)
    header = next(reader, None)
    if header is None or tuple(h.strip() for h in header) != CSV_HEADER:
        raise ValueError(f"Unexpected header {header!r}, expected {','.join(CSV_HEADER)}")

    states = []
    for line_no, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != len(CSV_HEADER):
            raise ValueError(f"Line {line_no}: expected {len(CSV_HEADER)} columns, got {len(row)}")
        i = int(row[0])
        if i != len(states):
            raise ValueError(f"Line {line_no}: sample index {i} out of sequence")
        t, x, y, vx, vy = (float(v) for v in row[1:])
        states.append(State(t=t, x=x, y=y, vx=vx, vy=vy))
    return Trajectory(states=tuple(states))
