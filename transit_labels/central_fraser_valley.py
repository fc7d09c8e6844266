"""Central Fraser Valley Transit System (Abbotsford / Mission) label normalizer.

Source feed: https://www.bctransit.com/open-data
"""

from __future__ import annotations

import logging
from typing import Optional

from transit_labels import clean_utils
from transit_labels.agency_tools import AgencyTools, is_digits_only
from transit_labels.config import AgencyConfig
from transit_labels.errors import ConfigurationError
from transit_labels.models import RouteRecord
from transit_labels.rules import NormalizationRule, apply_steps

logger = logging.getLogger(__name__)

# "from - to - via ..." -> "to"; everything after the via separator goes
HEADSIGN_KEEP_TO = NormalizationRule.compile(
    r"^(?:[^-]+ -)?([^-]+)(?:- .*)?", r"\1", name="headsign-keep-to"
)
HEADSIGN_REMOVE_FROM = NormalizationRule.compile(r"^[^-]+ -", "", name="headsign-remove-from")
# "to- via" -> "to via via"
HEADSIGN_TO_VIA = NormalizationRule.compile(
    r"^([^-]+)- ([^-]+)",
    lambda match: f"{match.group(1).rstrip()} via {match.group(2)}",
    name="headsign-to-via",
)
ENDS_WITH_CONNECTOR = NormalizationRule.compile(r"\s+connector\s*$", "", name="ends-with-connector")
BAY_LETTER = NormalizationRule.compile(r"\s*\bbay [a-z]\b", "", name="bay-letter")
CLEAN_AND = NormalizationRule(clean_utils.CLEAN_AND, clean_utils.CLEAN_AND_REPLACEMENT, name="clean-and")


def _strip(text: str) -> str:
    return text.strip()


class CentralFraserValleyNormalizer(AgencyTools):
    def __init__(self, config: Optional[AgencyConfig] = None):
        super().__init__(config)
        self.head_sign_steps = (
            clean_utils.clean_upper_case,
            ENDS_WITH_CONNECTOR,
            CLEAN_AND,
            clean_utils.clean_street_types,
            clean_utils.clean_label,
        )
        self.direction_headsign_steps = (
            HEADSIGN_KEEP_TO,
            clean_utils.keep_to_and_remove_via,
            self.clean_head_sign,
            BAY_LETTER,
            _strip,
        )
        self.trip_headsign_steps = (
            HEADSIGN_REMOVE_FROM,
            HEADSIGN_TO_VIA,
            clean_utils.keep_to_and_remove_via,
            self.clean_head_sign,
        )
        self.stop_name_steps = (
            clean_utils.clean_upper_case,
            clean_utils.clean_bounds,
            clean_utils.clean_at,
            clean_utils.clean_street_types,
            clean_utils.clean_label,
        )
        self.route_long_name_steps = (
            clean_utils.clean_upper_case,
            clean_utils.clean_slashes,
            clean_utils.clean_numbers,
            clean_utils.clean_street_types,
            clean_utils.clean_label,
        )

    def should_exclude(self, route: RouteRecord) -> bool:
        extra = {"route_id": route.route_id, "short_name": route.short_name}
        if self.config.excluded_long_name_marker in (route.long_name or ""):
            logger.debug("route served by the Fraser Valley Express app", extra=extra)
            return True
        short_name = route.short_name.strip()
        if is_digits_only(short_name) and int(short_name) > self.config.max_route_number:
            logger.debug("route served by the Chilliwack app", extra=extra)
            return True
        return super().should_exclude(route)

    def resolve_id(self, short_name: str) -> Optional[int]:
        override = self.config.route_id_overrides.get(short_name.strip())
        if override is not None:
            return override
        return super().resolve_id(short_name)

    def color_for(self, route: RouteRecord) -> str:
        route_number = int(route.short_name)
        color = self.config.route_colors.get(route_number)
        if color is None:
            raise ConfigurationError(f"Unexpected route color for {route.describe()}!", route=route)
        return color

    def allow_non_descriptive_headsigns(self, route_id: int) -> bool:
        if route_id in self.config.non_descriptive_headsign_routes:
            return True
        return super().allow_non_descriptive_headsigns(route_id)

    def clean_route_long_name(self, long_name: str) -> str:
        return apply_steps(self.route_long_name_steps, long_name)

    def clean_head_sign(self, headsign: str) -> str:
        return apply_steps(self.head_sign_steps, headsign)

    def clean_direction_headsign(self, direction_id: int, from_stop_name: bool, headsign: str) -> str:
        return apply_steps(self.direction_headsign_steps, headsign)

    def clean_trip_headsign(self, headsign: str) -> str:
        return apply_steps(self.trip_headsign_steps, headsign)

    def clean_stop_name(self, name: str) -> str:
        return apply_steps(self.stop_name_steps, name)
