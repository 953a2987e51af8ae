#!/usr/bin/env python3
"""
Hike Log Analytics CLI — dashboard summary, search, and API server.

USAGE:
  python -m hikelog.cli summary                              # Fetch HIKELOG_SHEET_URL, print dashboard
  python -m hikelog.cli summary --url "https://...output=csv"
  python -m hikelog.cli summary --file hikes.csv             # Local CSV export
  python -m hikelog.cli summary --file hikes.csv --json      # Full dashboard as JSON

  python -m hikelog.cli search "mission peak"                # Search location/comments/id/date
  python -m hikelog.cli search --year 2023

  python -m hikelog.cli serve                                # Start API server
  python -m hikelog.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from hikelog.config import SHEET_URL
from hikelog.data.loader import FetchError, read_csv_text
from hikelog.data.store import HikeStore, RecordStore
from hikelog.analytics.categories import demanding_hikes, scenic_hikes, weather_hikes, food_hikes
from hikelog.analytics.dashboard import (
    aggregate_stats,
    dashboard_summary,
    milestones,
    top_locations,
    year_histogram,
)
from hikelog.analytics.search import search_hikes


def _load_snapshot(args) -> RecordStore:
    """Build the RecordStore from --file, --url, or the configured sheet."""
    store = HikeStore(source_url=getattr(args, "url", None) or SHEET_URL)
    if getattr(args, "file", None):
        store.load_text(read_csv_text(Path(args.file)))
    else:
        store.refresh()
    return store.snapshot


def _hike_line(hike) -> str:
    return f"  #{hike.id:<5}{hike.date:<12}{hike.location[:40]:<42}{hike.miles:>6.1f} mi {hike.elevation:>7,.0f} ft"


def cmd_summary(args):
    """Print the dashboard for the current hike log."""
    snapshot = _load_snapshot(args)

    if args.json:
        print(json.dumps(dashboard_summary(snapshot), indent=2))
        return

    stats = aggregate_stats(snapshot)
    print("\n" + "=" * 70)
    print("  HIKE LOG — SUMMARY")
    print("=" * 70)
    print(f"  Hikes:            {stats.hike_count:,}")
    print(f"  Since:            {stats.since or 'N/A'}")
    print(f"  Total miles:      {stats.total_miles:,.1f}")
    print(f"  Total elevation:  {stats.total_elevation:,.0f} ft")
    print(f"  Most active year: {stats.active_year or 'N/A'} ({stats.active_count} hikes)")
    print(f"  Hikes per year:   {stats.average_hikes_per_year:.1f}")

    print("\n  HIKES PER YEAR")
    for entry in year_histogram(snapshot):
        print(f"  {entry.year}  {'#' * min(entry.count, 50)} {entry.count}")

    print("\n  MILESTONES")
    for hike in milestones(snapshot):
        print(_hike_line(hike))

    print("\n  TOP LOCATIONS")
    for i, loc in enumerate(top_locations(snapshot), 1):
        print(f"  {i}. {loc.name:<40}{loc.count:>4}")

    print("\n  MOST DEMANDING")
    for scored in demanding_hikes(snapshot):
        print(f"{_hike_line(scored.hike)}  score {scored.score:,.0f}")

    for title, compute in [("SCENIC", scenic_hikes), ("WEATHER", weather_hikes), ("FOOD", food_hikes)]:
        hikes = compute(snapshot)
        print(f"\n  {title} ({len(hikes)})")
        for hike in hikes:
            print(_hike_line(hike))
    print("=" * 70 + "\n")


def cmd_search(args):
    """Search the hike log by text and/or year."""
    snapshot = _load_snapshot(args)
    results = search_hikes(snapshot, args.query, args.year)
    print(f"\n{len(results)} of {len(snapshot)} hikes match\n")
    for hike in results:
        print(_hike_line(hike))


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Hike Log Analytics API on port {args.port}...")
    uvicorn.run("hikelog.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_source_args(p: argparse.ArgumentParser) -> None:
    src = p.add_mutually_exclusive_group()
    src.add_argument("--url", help="Published sheet CSV URL (default: HIKELOG_SHEET_URL)")
    src.add_argument("--file", help="Local CSV export")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Hike Log Analytics — hiking log stats and rankings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # summary subcommand
    summary_parser = subparsers.add_parser("summary", help="Print the dashboard")
    _add_source_args(summary_parser)
    summary_parser.add_argument("--json", action="store_true", help="Dump every view as JSON")
    summary_parser.set_defaults(func=cmd_summary)

    # search subcommand
    search_parser = subparsers.add_parser("search", help="Search hikes")
    search_parser.add_argument("query", nargs="?", default="", help="Text to match")
    search_parser.add_argument("--year", help="4-digit year or 'all'")
    _add_source_args(search_parser)
    search_parser.set_defaults(func=cmd_search)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")
    try:
        args.func(args)
    except FetchError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
