#!/usr/bin/env python3
"""Dump the synthetic data pyflota generates for a given day.

Prints the fleet roster, the routes with their timelines, the zones and
every event of the day with its lifecycle and status, either as readable
sections or as the camelCase JSON the dashboard consumes.

Usage
-----
::

    python scripts/dump_synthetic.py --date 2025-09-04 --events 10

Options::

    --date YYYY-MM-DD    Reference day (default: 2025-09-04)
    --events N           Number of events to generate (default: 10)
    --routes N           Number of routes to generate (default: 6)
    --route-start HH:MM  Route start time on the reference day (default: 06:00)
    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout

Base coordinate and fleet size come from ``FLOTA_*`` environment
variables (see :class:`pyflota.config.FlotaConfig`).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import UTC, date, datetime, time
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyflota import FleetSynth, FlotaConfig, FlotaConfigError  # noqa: E402
from pyflota.models import FlotaBaseModel  # noqa: E402
from pyflota.timing import event_code, format_duration  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _dump(model: FlotaBaseModel) -> dict[str, Any]:
    return model.model_dump(by_alias=True, mode="json")


def _event_key(day: date, index: int) -> str:
    return f"{day:%Y%m%d}-event-{index}"


# ── main ─────────────────────────────────────────────────────


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump pyflota synthetic fleet data")
    parser.add_argument("--date", type=date.fromisoformat, default=date(2025, 9, 4), help="Reference day")
    parser.add_argument("--events", type=int, default=10, help="Number of events")
    parser.add_argument("--routes", type=int, default=6, help="Number of routes")
    parser.add_argument("--route-start", type=time.fromisoformat, default=time(6, 0), help="Route start time")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output as JSON")
    parser.add_argument("--output", "-o", help="Write output to file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = FlotaConfig.from_env()
    except FlotaConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    synth = FleetSynth(config)
    day: date = args.date
    route_start = datetime.combine(day, args.route_start, tzinfo=UTC)
    routes = synth.routes(args.routes)
    fleet = synth.fleet()

    result: dict[str, Any] = {
        "date": day.isoformat(),
        "routeStart": route_start.isoformat(),
        "basePosition": list(config.base_position),
        "vehicles": [_dump(vehicle) for vehicle in fleet],
        "routes": [_dump(route) for route in routes],
        "zones": [_dump(zone) for zone in synth.zones()],
        "segments": {route.id: [_dump(segment) for segment in synth.segments(route)] for route in routes},
        "events": [],
    }

    out: list[str] = [_section("pyflota dump_synthetic")]
    out.append(f"  date      : {day.isoformat()}")
    out.append(f"  base      : {config.base_latitude}, {config.base_longitude}")

    out.append(_section("VEHICLES"))
    for vehicle in fleet:
        out.append(
            f"  {vehicle.display_name:<14} {vehicle.state.value:<10} {vehicle.tag:<12} "
            f"report={vehicle.last_report_minutes}min ({vehicle.report_freshness.value})"
        )

    out.append(_section("ROUTES"))
    for route in routes:
        points = len(route.coordinates)
        out.append(f"  {route.name:<28} {route.pattern.value:<14} points={points} {route.distance_km}km")
        for segment in synth.segments(route):
            out.append(f"      {segment.time_range}  {segment.name:<9} {segment.duration}")

    out.append(_section("ZONES"))
    for zone in synth.zones():
        out.append(f"  {zone.id:<18} {zone.name:<20} {', '.join(zone.tags)}")

    out.append(_section("EVENTS"))
    for index in range(args.events):
        event_id = _event_key(day, index)
        route = routes[index % len(routes)] if routes else []
        record = synth.event_with_location(event_id, route, route_start, day)
        result["events"].append(_dump(record))

        lifecycle = record.lifecycle
        start, end, alignment = lifecycle.start_location, lifecycle.end_location, lifecycle.route_alignment
        minutes = int(lifecycle.duration.total_seconds() // 60)
        out.append(f"  {event_code(event_id)}  {record.event.template_name} [{record.event.severity.value}]")
        out.append(f"      status   : {record.status.label}")
        out.append(f"      start    : {start.timestamp:%H:%M} {start.name}")
        out.append(f"      end      : {end.timestamp:%Y-%m-%d %H:%M} {end.name}")
        out.append(f"      duration : {format_duration(minutes)}")
        out.append(f"      on route : {alignment.starts_on_route}/{alignment.ends_on_route}")

    payload = json.dumps(result, indent=2, ensure_ascii=False)
    if args.json_mode:
        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"JSON written to {args.output}", file=sys.stderr)
        else:
            print(payload)
    else:
        print("\n".join(out))
        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"JSON written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
