from __future__ import annotations

import argparse
import sys

from neontycoon.catalog import default_catalog
from neontycoon.formatting import format_simulation_report, format_status_report
from neontycoon.log import bind_context, configure_logging
from neontycoon.runtime import GameEngine
from neontycoon.simulation import GreedyCheapest, Simulation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neontycoon",
        description="Neon Tycoon economy engine",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("demo", help="Click once and try to buy the first building")

    sim = sub.add_parser("simulate", help="Run a headless session")
    sim.add_argument(
        "--seconds", type=float, default=600, help="Simulated time (default: 600)"
    )
    sim.add_argument("--cps", type=float, default=5.0, help="Clicks per second")
    sim.add_argument(
        "--tick-resolution", type=float, default=1.0, help="Seconds per tick"
    )
    sim.add_argument(
        "--prestige",
        action="store_true",
        help="Prestige whenever the potential is positive",
    )

    return parser


def run_demo() -> GameEngine:
    engine = GameEngine(default_catalog())

    print("Initializing Neon Tycoon core...")
    print(f"Money: {engine.get_money():g}")

    engine.click()
    print(f"Clicked! Money: {engine.get_money():g}")

    if engine.buy_building(0):
        print("Bought building!")
    else:
        print("Need more money for building.")
    return engine


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(level=args.log_level, json=args.json_logs)
    bind_context(command=args.command)

    if args.command == "demo":
        run_demo()
    elif args.command == "simulate":
        engine = GameEngine(default_catalog())
        strategy = GreedyCheapest(cps=args.cps, prestige=args.prestige)
        sim = Simulation(
            engine,
            strategy,
            duration=args.seconds,
            tick_resolution=args.tick_resolution,
        )
        report = sim.run()
        print(format_simulation_report(report, strategy))
        print()
        print(format_status_report(engine))
