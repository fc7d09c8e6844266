from typing import Dict, Optional, Type

from transit_labels.agency_tools import AgencyTools
from transit_labels.central_fraser_valley import CentralFraserValleyNormalizer
from transit_labels.config import AgencyConfig
from transit_labels.errors import NormalizationError

AGENCIES: Dict[str, Type[AgencyTools]] = {
    "cfv": CentralFraserValleyNormalizer,
}


def build_agency_tools(key: str, config: Optional[AgencyConfig] = None) -> AgencyTools:
    """Instantiate the normalizer registered under ``key``."""
    normalized = (key or "").strip().lower()
    tools_cls = AGENCIES.get(normalized)
    if tools_cls is None:
        known = ", ".join(sorted(AGENCIES))
        raise NormalizationError(404, f"Unknown agency '{key}'. Known agencies: {known}.")
    return tools_cls(config)
