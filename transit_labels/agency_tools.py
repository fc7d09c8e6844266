"""Capabilities every agency normalizer provides to the feed pipeline.

Concrete agencies subclass :class:`AgencyTools` and override the hooks they
need. The defaults here are the framework behaviour used when an agency has no
opinion: keep every route, derive ids from the short name, and pass labels
through the generic cleaners.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Optional

from transit_labels import clean_utils
from transit_labels.config import AgencyConfig
from transit_labels.models import RouteRecord

_ROUTE_NUMBER_WITH_SUFFIX = re.compile(r"^([0-9]+)([A-Z])$", re.IGNORECASE)
ROUTE_SUFFIX_ID_OFFSET = 10_000
_HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")
_ASCII_DIGITS = re.compile(r"[0-9]+")


def is_digits_only(value: str) -> bool:
    """ASCII digits only; Unicode digits such as "²" do not count."""
    return _ASCII_DIGITS.fullmatch(value) is not None


class AgencyTools(ABC):
    def __init__(self, config: Optional[AgencyConfig] = None):
        self.config = config or AgencyConfig()
        self._route_id_cleanup = re.compile(self.config.route_id_cleanup_pattern)

    @property
    def agency_name(self) -> str:
        return self.config.agency_name

    @property
    def agency_color(self) -> str:
        return self.config.agency_color

    @property
    def route_type(self) -> int:
        return self.config.route_type

    # Route filtering

    def default_exclude(self, route: RouteRecord) -> bool:
        return False

    def should_exclude(self, route: RouteRecord) -> bool:
        return self.default_exclude(route)

    # Route ids

    def clean_route_id(self, route_id: str) -> str:
        return self._route_id_cleanup.sub("", route_id.strip())

    def default_route_id(self, short_name: str) -> Optional[int]:
        """Derive an id from the short name: ``"12"`` -> 12, ``"12B"`` -> 20012, otherwise ``None``."""
        short_name = short_name.strip()
        if is_digits_only(short_name):
            return int(short_name)
        match = _ROUTE_NUMBER_WITH_SUFFIX.match(short_name)
        if match:
            letter_index = ord(match.group(2).upper()) - ord("A") + 1
            return letter_index * ROUTE_SUFFIX_ID_OFFSET + int(match.group(1))
        return None

    def resolve_id(self, short_name: str) -> Optional[int]:
        return self.default_route_id(short_name)

    def route_id_for(self, route: RouteRecord) -> Optional[int]:
        """Prefer the feed's own route id (shared with real-time feeds) when it is numeric."""
        cleaned = self.clean_route_id(route.route_id)
        if is_digits_only(cleaned):
            return int(cleaned)
        return self.resolve_id(route.short_name)

    # Colors

    @abstractmethod
    def color_for(self, route: RouteRecord) -> str:
        """Return the 6-hex-digit color of a numbered route."""

    def route_color_for(self, route: RouteRecord) -> str:
        """Feed color when valid, else the route's brand color, else the agency color."""
        feed_color = (route.color or "").strip().lstrip("#")
        if _HEX_COLOR.match(feed_color):
            return feed_color.upper()
        if is_digits_only(route.short_name.strip()):
            return self.color_for(route)
        return self.agency_color

    # Labels

    def clean_route_long_name(self, long_name: str) -> str:
        return clean_utils.clean_label(long_name)

    def clean_direction_headsign(self, direction_id: int, from_stop_name: bool, headsign: str) -> str:
        return clean_utils.clean_label(headsign)

    def clean_trip_headsign(self, headsign: str) -> str:
        return clean_utils.clean_label(headsign)

    def clean_stop_name(self, name: str) -> str:
        return clean_utils.clean_label(name)

    def allow_non_descriptive_headsigns(self, route_id: int) -> bool:
        return False
