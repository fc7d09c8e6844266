from pathlib import Path

import pandas as pd


def sample_routes() -> pd.DataFrame:
    """Routes covering every exclusion, id and color branch of the CFV normalizer."""
    return pd.DataFrame(
        [
            {"route_id": "1-CFV", "route_short_name": "1", "route_long_name": "Bourquin/Downtown", "route_color": ""},
            {"route_id": "66-CFV", "route_short_name": "66", "route_long_name": "FVX Express", "route_color": ""},
            {"route_id": "55-CFV", "route_short_name": "55", "route_long_name": "Chilliwack Local", "route_color": ""},
            {"route_id": "FAIR-CFV", "route_short_name": "FAIR", "route_long_name": "Fair Shuttle", "route_color": ""},
            {"route_id": "3-CFV", "route_short_name": "3", "route_long_name": "Huntingdon Rd", "route_color": "ff0000"},
        ]
    )


def sample_trips() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"route_id": "1-CFV", "trip_id": "t1", "direction_id": "0", "trip_headsign": "Abbotsford - Mission - via Sumas"},
            {"route_id": "1-CFV", "trip_id": "t2", "direction_id": "0", "trip_headsign": "Abbotsford - Mission - via Sumas"},
            {"route_id": "1-CFV", "trip_id": "t3", "direction_id": "1", "trip_headsign": "Bourquin Exchange Bay A"},
            {"route_id": "3-CFV", "trip_id": "t4", "direction_id": "0", "trip_headsign": "Downtown - Fraser Hwy- South Poplar"},
            {"route_id": "66-CFV", "trip_id": "t5", "direction_id": "0", "trip_headsign": "Lougheed Station"},
        ]
    )


def sample_stops() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"stop_id": "100", "stop_name": "Main St @ Bay A"},
            {"stop_id": "101", "stop_name": "Clearbrook Rd (Southbound)"},
            {"stop_id": "102", "stop_name": "Sumas Way AT Marshall Rd"},
        ]
    )


def write_feed(directory: Path, routes: pd.DataFrame = None, trips: pd.DataFrame = None, stops: pd.DataFrame = None) -> Path:
    """Write a minimal extracted GTFS feed into ``directory``."""
    (sample_routes() if routes is None else routes).to_csv(directory / "routes.txt", index=False)
    (sample_trips() if trips is None else trips).to_csv(directory / "trips.txt", index=False)
    (sample_stops() if stops is None else stops).to_csv(directory / "stops.txt", index=False)
    return directory
