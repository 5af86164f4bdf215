"""
Run configuration.

A run is fully described by the gravitational parameter, the step size, the
step count and the initial state. Values can come from keyword arguments, a
plain dict, or a YAML file; missing entries fall back to the reference
scenario (low Earth orbit insertion at 7000 km with 7.7 km/s prograde speed).
"""

import logging
import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from models.central_body import BODY_REGISTRY, EARTH
from models.state import State
from simulation.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULTS: Dict[str, Any] = {
    "body": "earth",
    "dt": 0.1,  # [s]
    "steps": 200000,
    "x0": 7.00e6,  # [m]
    "y0": 0.0,  # [m]
    "vx0": 0.0,  # [m/s]
    "vy0": 7.7e3,  # [m/s]
    "t0": 0.0,  # [s]
}

CONFIG_KEYS = frozenset({"mu", "G", "M", *DEFAULTS})


def _default_initial_state() -> State:
    return State(
        t=DEFAULTS["t0"],
        x=DEFAULTS["x0"],
        y=DEFAULTS["y0"],
        vx=DEFAULTS["vx0"],
        vy=DEFAULTS["vy0"],
    )


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"'{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"'{key}' must be a number, got {value!r}") from exc


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"'{key}' must be an integer, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, Real) and float(value).is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ConfigurationError(f"'{key}' must be an integer, got {value!r}") from exc
    raise ConfigurationError(f"'{key}' must be an integer, got {value!r}")


@dataclass(frozen=True)
class SimulationParams:
    """
    Immutable parameters of one integration run.

    Attributes:
        mu (float): Gravitational parameter G*M [m³/s²]. Zero gives force-free motion.
        dt (float): Fixed step size [s], strictly positive.
        steps (int): Number of integration steps, strictly positive.
        initial_state (State): Seed state, copied verbatim into the trajectory.
    """

    mu: float = EARTH.mu
    dt: float = DEFAULTS["dt"]
    steps: int = DEFAULTS["steps"]
    initial_state: State = field(default_factory=_default_initial_state)

    def __post_init__(self):
        if isinstance(self.dt, bool) or not isinstance(self.dt, Real):
            raise ConfigurationError(f"dt must be a number, got {self.dt!r}")
        if not math.isfinite(self.dt) or self.dt <= 0.0:
            raise ConfigurationError(f"dt must be a finite positive number, got {self.dt!r}")

        if isinstance(self.steps, bool) or not isinstance(self.steps, Integral):
            raise ConfigurationError(f"steps must be an integer, got {self.steps!r}")
        if self.steps <= 0:
            raise ConfigurationError(f"steps must be positive, got {self.steps!r}")

        if isinstance(self.mu, bool) or not isinstance(self.mu, Real):
            raise ConfigurationError(f"mu must be a number, got {self.mu!r}")
        if not math.isfinite(self.mu) or self.mu < 0.0:
            raise ConfigurationError(f"mu must be finite and non-negative, got {self.mu!r}")

        if not isinstance(self.initial_state, State):
            raise ConfigurationError(
                f"initial_state must be a State, got {type(self.initial_state).__name__}"
            )
        if not self.initial_state.is_finite():
            raise ConfigurationError(f"initial state must be finite, got {self.initial_state}")

    @property
    def t0(self) -> float:
        """[s] Start time"""
        return self.initial_state.t

    @property
    def t_end(self) -> float:
        """[s] Time of the last sample"""
        return self.t0 + self.steps * self.dt

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "SimulationParams":
        """
        Build parameters from a flat mapping.

        Recognized keys: mu, G, M, body, dt, steps, x0, y0, vx0, vy0, t0.
        `mu` takes precedence; otherwise `G` and `M` default to those of
        `body` (Earth unless stated). Keys set to None are treated as absent.

        Raises:
            ConfigurationError: On unknown keys, unknown bodies or invalid values.
        """
        config = {k: v for k, v in dict(config).items() if v is not None}
        unknown = set(config) - CONFIG_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

        merged = {**DEFAULTS, **config}

        body_name = str(merged["body"]).lower()
        body = BODY_REGISTRY.get(body_name)
        if body is None:
            raise ConfigurationError(
                f"Unknown body '{merged['body']}', expected one of {sorted(BODY_REGISTRY)}"
            )

        if "mu" in config:
            mu = _as_float("mu", config["mu"])
        else:
            G = _as_float("G", merged.get("G", body.G))
            M = _as_float("M", merged.get("M", body.M))
            mu = G * M

        initial_state = State(
            t=_as_float("t0", merged["t0"]),
            x=_as_float("x0", merged["x0"]),
            y=_as_float("y0", merged["y0"]),
            vx=_as_float("vx0", merged["vx0"]),
            vy=_as_float("vy0", merged["vy0"]),
        )

        return cls(
            mu=mu,
            dt=_as_float("dt", merged["dt"]),
            steps=_as_int("steps", merged["steps"]),
            initial_state=initial_state,
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SimulationParams":
        return cls.from_dict(load_config(path))

    def to_dict(self) -> Dict[str, Any]:
        s = self.initial_state
        return dict(
            mu=self.mu, dt=self.dt, steps=self.steps,
            x0=s.x, y0=s.y, vx0=s.vx, vy0=s.vy, t0=s.t,
        )


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration (empty if the file is empty).

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
        )
    logger.debug("Loaded configuration from %s: %s", path, data)
    return data
