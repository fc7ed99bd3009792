#!/usr/bin/env python3
# directions/route/cli.py
# -*- coding: utf-8 -*-

"""
Resolve a single route from the command line and print it as JSON.

    python -m directions.route.cli \\
        --origin "52.5219,13.4132" --destination "Potsdam" \\
        --waypoint "Spandau" --mode walking --pretty

The output is RouteResult.as_dict(): distance_km, duration_min, the flat
coordinate list, one waypoint record per step and the fare (if any).

Exit codes
----------
0  route resolved
1  the service or the network failed (see the log for the error kind)
2  origin or destination empty, nothing was requested
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from directions.core.config import get_directions_defaults
from directions.core.models import TravelMode
from directions.infra.logging import get_logger, init_logging, log_banner
from directions.route.client import DirectionsClient
from directions.route.common import DirectionsConfig, DirectionsError
from directions.view.controller import DirectionsController, DirectionsProps

_log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    defaults = get_directions_defaults()
    parser = argparse.ArgumentParser(
        description="Fetch a route from the directions service and print it as JSON."
    )

    parser.add_argument(
          "--origin"
        , required=True
        , help="Origin (place name or 'lat,lng')."
    )
    parser.add_argument(
          "--destination"
        , required=True
        , help="Destination (place name or 'lat,lng')."
    )
    parser.add_argument(
          "--waypoint"
        , dest="waypoints"
        , action="append"
        , default=[]
        , help="Intermediate stop; repeat for several, order is kept."
    )

    parser.add_argument(
          "--mode"
        , default=defaults.mode.value
        , type=str.upper
        , choices=[m.value for m in TravelMode]
        , help=f"Travel mode. Default: {defaults.mode.value}"
    )
    parser.add_argument(
          "--language"
        , default=defaults.language
        , help=f"Response language. Default: {defaults.language}"
    )
    parser.add_argument(
          "--region"
        , default=None
        , help="Region bias (ccTLD, e.g. 'br')."
    )
    parser.add_argument(
          "--optimize"
        , action="store_true"
        , help="Let the service reorder the waypoints."
    )

    # Service
    parser.add_argument(
          "--api-key"
        , default=None
        , help="API key. Default: env DIRECTIONS_API_KEY / GOOGLE_MAPS_API_KEY."
    )
    parser.add_argument(
          "--base-url"
        , default=defaults.base_url
        , help=f"Directions endpoint. Default: {defaults.base_url}"
    )

    # Output + logging
    parser.add_argument(
          "--pretty"
        , action="store_true"
        , help="Pretty-print JSON."
    )
    parser.add_argument(
          "--log-level"
        , default="INFO"
        , choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    parser.add_argument(
          "--log-file"
        , type=Path
        , default=None
        , help="Also write the log to this file."
    )

    return parser


async def _run(args: argparse.Namespace) -> int:
    errors: List[DirectionsError] = []
    started: List[bool] = []

    cfg = DirectionsConfig(api_key=args.api_key)
    with DirectionsClient(cfg) as client:
        ctrl = DirectionsController(
              client
            , on_start=lambda ev: started.append(True)
            , on_error=errors.append
        )
        result = await ctrl.mount(
            DirectionsProps(
                  origin=args.origin
                , destination=args.destination
                , waypoints=args.waypoints or None
                , api_key=cfg.api_key
                , mode=args.mode
                , language=args.language
                , region=args.region
                , optimize_waypoints=args.optimize
                , base_url=args.base_url
            )
        )
        ctrl.unmount()

    if not started:
        _log.error("Nothing requested: origin and destination must be non-empty.")
        return 2
    if result is None:
        kind = errors[0].kind if errors else "unknown"
        _log.error("No route (%s).", kind)
        return 1

    print(json.dumps(result.as_dict(), ensure_ascii=False, indent=2 if args.pretty else None))
    return 0


def main(
    argv: Optional[list[str]] = None
) -> int:
    args = _build_parser().parse_args(argv)

    init_logging(level=args.log_level, force=True, log_file=args.log_file)
    log_banner(_log, f"Directions {args.origin!r} → {args.destination!r} [{args.mode}]")

    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(main())
