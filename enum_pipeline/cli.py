"""Command line entrypoint."""

from __future__ import annotations

import argparse
import logging

from .config import load_world_config
from .errors import ConfigError, StepExecutionError
from .selfcheck import run_selfcheck
from .sim import peak, run_world, total_amount


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser."""
    parser = argparse.ArgumentParser(
        prog="enum-pipeline", description="Run operation pipelines over a demo grid world"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Run a YAML world config")
    run_p.add_argument("config", type=str, help="Path to world config YAML")
    run_p.add_argument("--ticks", type=int, default=1, help="Number of ticks to run")

    selfcheck_p = sub.add_parser(
        "selfcheck", help="Run dependency and smoke self-check"
    )
    selfcheck_p.add_argument(
        "--no-smoke",
        action="store_true",
        help="Run import checks only (skip smoke world run).",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "run":
        if args.ticks < 0:
            parser.exit(2, "Error: --ticks must be >= 0\n")
        try:
            config = load_world_config(args.config)
            world = run_world(config, ticks=args.ticks)
        except (ConfigError, StepExecutionError) as exc:
            parser.exit(2, f"Error: {exc}\n")

        value, (y, x) = peak(world)
        print(f"Done. Grid={world.shape}, ticks={world.ticks}, t={world.time_s:g}s")
        print(f"Total: {total_amount(world):.6g}")
        print(f"Peak: {value:.6g} at x={x}, y={y}")
        return 0

    if args.command == "selfcheck":
        report = run_selfcheck(smoke=not bool(args.no_smoke))
        print(report.to_text())
        return 0 if report.ok else 1

    parser.exit(2, "Unknown command\n")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
