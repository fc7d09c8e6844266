"""Per-agency constants injected into the normalizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping

from label_tables import route_colors as tables

GTFS_ROUTE_TYPE_BUS = 3


@dataclass(frozen=True)
class AgencyConfig:
    agency_name: str = tables.AGENCY_NAME
    agency_color: str = tables.AGENCY_COLOR
    route_type: int = GTFS_ROUTE_TYPE_BUS
    excluded_long_name_marker: str = tables.EXCLUDED_LONG_NAME_MARKER
    max_route_number: int = tables.MAX_ROUTE_NUMBER
    # Strips feed-variant qualifiers such as "12-CFV" -> "12".
    route_id_cleanup_pattern: str = r"-[A-Z]+$"
    route_colors: Mapping[int, str] = field(default_factory=lambda: tables.ROUTE_COLORS)
    route_id_overrides: Mapping[str, int] = field(default_factory=lambda: tables.ROUTE_ID_OVERRIDES)
    non_descriptive_headsign_routes: FrozenSet[int] = tables.NON_DESCRIPTIVE_HEADSIGN_ROUTES
