"""
Command line entry point.

Usage::

    swingby                                   # reference run -> swingby.csv
    swingby --config run.yaml --steps 60000 --plot orbit.png
    python -m simulation --mu 0 --vx0 10 --steps 100 -o line.csv
"""
import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from analysis import summarize
from models.central_body import BODY_REGISTRY
from simulation.config import SimulationParams, load_config
from simulation.exceptions import ConfigurationError, OutputError, SingularityError
from simulation.export import write_csv
from simulation.runner import TwoBodyRunner

log = logging.getLogger(__name__)

# command line flag -> configuration key
OVERRIDES = ("mu", "G", "M", "body", "dt", "steps", "x0", "y0", "vx0", "vy0", "t0")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swingby",
        description="Integrate a planar two-body trajectory with fixed-step RK4 and write it as CSV.",
    )
    parser.add_argument("--config", help="YAML file with run parameters")

    phys = parser.add_argument_group("physical model")
    phys.add_argument("--mu", type=float, help="Gravitational parameter G*M [m^3/s^2]")
    phys.add_argument("--G", type=float, help="Gravitational constant [m^3/kg/s^2]")
    phys.add_argument("--M", type=float, help="Central body mass [kg]")
    phys.add_argument("--body", choices=sorted(BODY_REGISTRY), help="Named central body (default: earth)")

    run = parser.add_argument_group("integration")
    run.add_argument("--dt", type=float, help="Step size [s] (default: 0.1)")
    run.add_argument("--steps", type=int, help="Number of steps (default: 200000)")
    run.add_argument("--t0", type=float, help="Start time [s] (default: 0)")

    init = parser.add_argument_group("initial state")
    init.add_argument("--x0", type=float, help="Initial x [m] (default: 7.0e6)")
    init.add_argument("--y0", type=float, help="Initial y [m] (default: 0)")
    init.add_argument("--vx0", type=float, help="Initial vx [m/s] (default: 0)")
    init.add_argument("--vy0", type=float, help="Initial vy [m/s] (default: 7.7e3)")

    out = parser.add_argument_group("output")
    out.add_argument("-o", "--output", default="swingby.csv", help="CSV destination, '-' for stdout (default: swingby.csv)")
    out.add_argument("--precision", type=int, default=6, help="Decimals written per value (default: 6)")
    out.add_argument("--plot", help="Also save an x-y plot of the orbit to this image file")
    out.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    return parser


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge the YAML file (if any) with command line overrides."""
    config: Dict[str, Any] = load_config(args.config) if args.config else {}
    for key in OVERRIDES:
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    return config


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _report(trajectory) -> None:
    summary = summarize(trajectory)
    log.info(
        "r_min=%.1f m  r_max=%.1f m  energy drift=%.3e  h drift=%.3e",
        summary["r_min"], summary["r_max"],
        summary["energy_drift"], summary["angular_momentum_drift"],
    )
    if summary["period_estimate"] is not None:
        log.info("Estimated orbital period: %.2f s", summary["period_estimate"])


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        config = build_config(args)
        params = SimulationParams.from_dict(config)
        if args.precision < 0:
            raise ConfigurationError(f"precision must be non-negative, got {args.precision}")
    except ConfigurationError as exc:
        log.error("Invalid configuration: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        trajectory = TwoBodyRunner(params).run()
    except SingularityError as exc:
        log.error("Integration aborted: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _report(trajectory)

    try:
        if args.output == "-":
            write_csv(trajectory, sys.stdout, precision=args.precision)
        else:
            write_csv(trajectory, args.output, precision=args.precision)
    except OutputError as exc:
        log.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        from analysis.preview import save_trajectory_plot

        body = None
        if "mu" not in config:
            body = BODY_REGISTRY.get(str(config.get("body", "earth")).lower())
        try:
            save_trajectory_plot(trajectory, args.plot, body=body)
        except OSError as exc:
            log.error("Cannot save plot to %s: %s", args.plot, exc)
            print(f"Error: cannot save plot to {args.plot}: {exc}", file=sys.stderr)
            return 1
        log.info("Saved orbit plot to %s", args.plot)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
