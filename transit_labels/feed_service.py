"""Apply an agency normalizer to parsed GTFS tables."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from transit_labels.agency_tools import AgencyTools
from transit_labels.errors import NormalizationError
from transit_labels.models import RouteRecord

logger = logging.getLogger(__name__)

ROUTE_COLUMNS = ["feed_route_id", "route_id", "route_short_name", "route_long_name", "route_color"]


def dataframe_to_records(df: Optional[pd.DataFrame]) -> List[Dict[str, Any]]:
    """Convert a DataFrame to JSON-friendly records."""
    if df is None or df.empty:
        return []
    normalized = df.astype(object).where(pd.notna(df), None)
    return normalized.to_dict(orient="records")


def _require_columns(df: pd.DataFrame, table: str, columns: Iterable[str]) -> None:
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise NormalizationError(400, f"{table} is missing columns: {', '.join(missing)}")


def _text(series: pd.Series) -> pd.Series:
    return series.fillna("").astype(str)


def _route_record(row: pd.Series) -> RouteRecord:
    color = row.get("route_color")
    return RouteRecord(
        route_id=str(row["route_id"]).strip(),
        short_name=str(row["route_short_name"]).strip(),
        long_name=str(row.get("route_long_name") or ""),
        color=str(color) if color else None,
    )


def normalize_routes(tools: AgencyTools, routes_df: pd.DataFrame) -> pd.DataFrame:
    """Drop excluded routes, then resolve ids and colors and clean long names.

    ``ConfigurationError`` from the color lookup propagates to the caller.
    """
    _require_columns(routes_df, "routes.txt", ["route_id", "route_short_name"])
    if routes_df.empty:
        return pd.DataFrame(columns=ROUTE_COLUMNS)

    raw = routes_df.copy()
    raw["route_short_name"] = _text(raw["route_short_name"])
    raw["route_long_name"] = _text(raw["route_long_name"]) if "route_long_name" in raw.columns else ""
    raw["route_color"] = _text(raw["route_color"]) if "route_color" in raw.columns else ""

    records = [_route_record(row) for _, row in raw.iterrows()]
    kept = [record for record in records if not tools.should_exclude(record)]
    logger.info(
        "routes normalized",
        extra={"agency": tools.agency_name, "rows": len(records), "excluded": len(records) - len(kept)},
    )

    rows = [
        {
            "feed_route_id": record.route_id,
            "route_id": tools.route_id_for(record),
            "route_short_name": record.short_name,
            "route_long_name": tools.clean_route_long_name(record.long_name),
            "route_color": tools.route_color_for(record),
        }
        for record in kept
    ]
    normalized = pd.DataFrame(rows, columns=ROUTE_COLUMNS)
    normalized["route_id"] = normalized["route_id"].astype("Int64")
    return normalized


def normalize_trips(tools: AgencyTools, trips_df: pd.DataFrame) -> pd.DataFrame:
    _require_columns(trips_df, "trips.txt", ["route_id", "trip_id"])
    trips = trips_df.copy()
    if "trip_headsign" not in trips.columns:
        trips["trip_headsign"] = ""
    trips["trip_headsign"] = _text(trips["trip_headsign"]).map(tools.clean_trip_headsign)
    logger.info("trips normalized", extra={"agency": tools.agency_name, "rows": len(trips)})
    return trips


def normalize_direction_headsigns(tools: AgencyTools, trips_df: pd.DataFrame) -> pd.DataFrame:
    """One cleaned direction headsign per (route, direction), taken from the most common trip headsign."""
    _require_columns(trips_df, "trips.txt", ["route_id", "trip_headsign"])
    trips = trips_df.copy()
    if "direction_id" not in trips.columns:
        trips["direction_id"] = 0
    trips["direction_id"] = pd.to_numeric(trips["direction_id"], errors="coerce").fillna(0).astype(int)
    trips["trip_headsign"] = _text(trips["trip_headsign"])

    columns = ["route_id", "direction_id", "direction_headsign"]
    if trips.empty:
        return pd.DataFrame(columns=columns)

    rows = []
    for (route_id, direction_id), group in trips.groupby(["route_id", "direction_id"], sort=True):
        headsign = group["trip_headsign"].mode().iloc[0]
        rows.append(
            {
                "route_id": route_id,
                "direction_id": int(direction_id),
                "direction_headsign": tools.clean_direction_headsign(int(direction_id), False, headsign),
            }
        )
    return pd.DataFrame(rows, columns=columns)


def normalize_stops(tools: AgencyTools, stops_df: pd.DataFrame) -> pd.DataFrame:
    _require_columns(stops_df, "stops.txt", ["stop_id", "stop_name"])
    stops = stops_df.copy()
    stops["stop_name"] = _text(stops["stop_name"]).map(tools.clean_stop_name)
    logger.info("stops normalized", extra={"agency": tools.agency_name, "rows": len(stops)})
    return stops
