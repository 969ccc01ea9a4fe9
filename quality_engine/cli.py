"""
CLI interface for the Shop Quality Engine.

Supports three modes:
  simulate — Age an inventory N days, write the daily report.
  replay   — Re-run a simulation and verify the final hash matches expected.
  generate — Generate a synthetic inventory.
"""
from __future__ import annotations

import argparse
import logging
import sys


def _setup_logging(verbose: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if verbose else logging.INFO
    fmt = "%(asctime)s [%(levelname)-7s] %(name)s — %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="quality-engine",
        description="Shop Quality Engine — daily quality and expiry updates",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug-level logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # --- simulate ---
    sim_p = sub.add_parser("simulate", help="Age an inventory by N days")
    sim_p.add_argument("--inventory", required=True, help="Path to inventory.json")
    sim_p.add_argument("--days", type=int, default=1, help="Days to simulate (default 1)")
    sim_p.add_argument("--report", required=True, help="Path to report.jsonl")
    sim_p.add_argument("--output", required=True, help="Path to the aged inventory.json")

    # --- replay ---
    replay_p = sub.add_parser("replay", help="Replay a simulation and verify hash")
    replay_p.add_argument("--inventory", required=True, help="Path to inventory.json")
    replay_p.add_argument("--days", type=int, default=1, help="Days to simulate (default 1)")
    replay_p.add_argument("--report", required=True, help="Path to report.jsonl")
    replay_p.add_argument("--output", required=True, help="Path to the aged inventory.json")
    replay_p.add_argument("--verify", required=True, help="Path to expected_hash.txt")

    # --- generate ---
    gen_p = sub.add_parser("generate", help="Generate a synthetic inventory")
    gen_p.add_argument("--output", required=True, help="Path to output inventory.json")
    gen_p.add_argument(
        "--count", type=int, default=20, help="Number of items (default 20)"
    )
    gen_p.add_argument(
        "--seed", type=int, default=42, help="Random seed for reproducibility"
    )

    args = parser.parse_args(argv)
    _setup_logging(verbose=args.verbose)

    logger = logging.getLogger("quality_engine.cli")

    if args.command == "simulate":
        from quality_engine.simulation import run_simulation

        try:
            final_hash = run_simulation(args.inventory, args.days, args.report, args.output)
            print(f"SIMULATE OK — {args.days} days, final inventory hash: {final_hash}")
        except Exception as exc:
            logger.exception("Simulation failed")
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)

    elif args.command == "replay":
        from quality_engine.simulation import replay_simulation

        try:
            ok = replay_simulation(
                args.inventory, args.days, args.report, args.output, args.verify
            )
            if ok:
                print("REPLAY OK: hash matches ✓")
            else:
                print("REPLAY FAILED: hash does NOT match ✗", file=sys.stderr)
                sys.exit(1)
        except Exception as exc:
            logger.exception("Replay failed")
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)

    elif args.command == "generate":
        from quality_engine.generate_inventory import generate_inventory

        try:
            generate_inventory(args.output, args.count, args.seed)
            print(f"Generated {args.count} items → {args.output}")
        except Exception as exc:
            logger.exception("Generation failed")
            print(f"ERROR: {exc}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
