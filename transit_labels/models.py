"""Feed records handed over by the GTFS reader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RouteRecord:
    route_id: str
    short_name: str
    long_name: str = ""
    color: Optional[str] = None

    def describe(self) -> str:
        return f"Route(id={self.route_id!r}, short_name={self.short_name!r}, long_name={self.long_name!r})"


@dataclass(frozen=True)
class TripRecord:
    route_id: str
    trip_id: str
    headsign: str = ""
    direction_id: Optional[int] = None


@dataclass(frozen=True)
class StopRecord:
    stop_id: str
    name: str
