import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd

from transit_labels.errors import ConfigurationError, NormalizationError
from transit_labels.feed_service import (
    dataframe_to_records,
    normalize_direction_headsigns,
    normalize_routes,
    normalize_stops,
    normalize_trips,
)
from transit_labels.logging_setup import setup_logging
from transit_labels.registry import AGENCIES, build_agency_tools

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Normalize route, headsign and stop labels of an extracted GTFS feed."
    )
    parser.add_argument(
        "gtfs_dir",
        type=Path,
        help="Directory holding routes.txt, trips.txt and stops.txt."
    )
    parser.add_argument(
        "--agency",
        default="cfv",
        choices=sorted(AGENCIES),
        help="Agency whose conventions apply."
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON document here instead of stdout."
    )
    return parser.parse_args(argv)


def read_table(gtfs_dir: Path, name: str) -> pd.DataFrame:
    path = gtfs_dir / name
    if not path.exists():
        raise NormalizationError(404, f"Missing GTFS file: {path}")
    return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8-sig")


def _json_default(value):
    # numpy scalars coming out of pandas frames
    if hasattr(value, "item"):
        return value.item()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_document(tools, gtfs_dir: Path) -> dict:
    routes = normalize_routes(tools, read_table(gtfs_dir, "routes.txt"))
    trips_raw = read_table(gtfs_dir, "trips.txt")
    trips_raw = trips_raw.loc[trips_raw["route_id"].isin(routes["feed_route_id"])]
    directions = normalize_direction_headsigns(tools, trips_raw)
    trips = normalize_trips(tools, trips_raw)
    stops = normalize_stops(tools, read_table(gtfs_dir, "stops.txt"))
    return {
        "agency": {
            "name": tools.agency_name,
            "color": tools.agency_color,
            "route_type": tools.route_type,
        },
        "routes": dataframe_to_records(routes),
        "directions": dataframe_to_records(directions),
        "trips": dataframe_to_records(trips[["route_id", "trip_id", "trip_headsign"]]),
        "stops": dataframe_to_records(stops[["stop_id", "stop_name"]]),
    }


def main(argv=None) -> int:
    args = parse_args(argv)
    tools = build_agency_tools(args.agency)
    setup_logging(agency=tools.agency_name)
    try:
        document = build_document(tools, args.gtfs_dir)
    except ConfigurationError as exc:
        logger.critical(str(exc))
        return 1
    except NormalizationError as exc:
        logger.error(str(exc))
        return 2

    payload = json.dumps(document, indent=2, default=_json_default)
    if args.output:
        args.output.write_text(payload + "\n", encoding="utf-8")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
