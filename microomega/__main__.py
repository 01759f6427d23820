"""Entry point: ``python -m microomega``.

Supports two modes:
  - ``python -m microomega``        → Launch the FastAPI core service
  - ``python -m microomega plan``   → Print a cluster plan as JSON (diff server vs. client output)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Micro-Omega Deterministic Simulation Core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI core service (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--cors-origin", action="append", dest="cors_origins", default=None,
                     help="Allowed browser origin; repeat for several (default: any)")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless plan mode ---
    plan = sub.add_parser("plan", help="Print the cluster plan for a seed")
    plan.add_argument("--seed", type=int, default=1337)
    plan.add_argument("--remaining", type=int, default=10)
    plan.add_argument("--scatter-min", type=float, default=None)
    plan.add_argument("--scatter-radius", type=float, default=None)
    plan.add_argument("--type", type=str, default=None, dest="fallback_type")
    plan.add_argument("--size", type=int, default=None, dest="size_override")
    plan.add_argument("--layout", action="store_true", help="Also print the client layout for the seed")
    plan.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from microomega.api.app import create_app
    from microomega.config import CoreConfig

    config = CoreConfig(
        host=args.host,
        port=args.port,
        cors_origins=tuple(args.cors_origins or ("*",)),
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def _run_plan(args: argparse.Namespace) -> None:
    from microomega.config import CoreConfig
    from microomega.systems.cluster_planner import ClusterPlanOptions, plan_cluster_layout, plan_organic_cluster
    from microomega.systems.fingerprint import fingerprint_hex, fingerprint_layout, fingerprint_plan
    from microomega.systems.rng import SeededRandom
    from microomega.utils.logging import setup_logging

    config = CoreConfig(log_level=args.log_level)
    setup_logging(config.log_level, stream=sys.stderr)

    options = ClusterPlanOptions(
        remaining=args.remaining,
        scatter_min=args.scatter_min if args.scatter_min is not None else config.scatter_min,
        scatter_radius=args.scatter_radius if args.scatter_radius is not None else config.scatter_radius,
        fallback_type=args.fallback_type,
        size_override=args.size_override,
    )
    plan = plan_organic_cluster(args.seed, options)
    output = {"plan": plan.to_dict(), "fingerprint": fingerprint_hex(fingerprint_plan(plan))}

    if args.layout:
        layout = plan_cluster_layout(SeededRandom(args.seed))
        output["layout"] = layout.to_dict()
        output["layoutFingerprint"] = fingerprint_hex(fingerprint_layout(layout))

    logger.info("Planned %d entries for seed %d", plan.size, args.seed)
    print(json.dumps(output, indent=2))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            # Re-parse with serve defaults
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "plan":
        _run_plan(args)


if __name__ == "__main__":
    main()
