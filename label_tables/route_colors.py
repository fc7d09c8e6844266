"""Static route tables for the Central Fraser Valley Transit System.

Colors come from the agency's corporate graphic standards and route maps. Every
route number kept by the route filter must appear here.
"""

from types import MappingProxyType

AGENCY_NAME = "CFV TS"

AGENCY_COLOR_GREEN = "34B233"
AGENCY_COLOR_BLUE = "002C77"
AGENCY_COLOR = AGENCY_COLOR_GREEN

# Routes whose long name carries this marker are published in the Fraser Valley Express app.
EXCLUDED_LONG_NAME_MARKER = "FVX"

# Route numbers above this belong to the Chilliwack system.
MAX_ROUTE_NUMBER = 50

ROUTE_COLORS = MappingProxyType(
    {
        1: "8CC63F",
        2: "8077B6",
        3: "F8931E",
        4: "AC5C3B",
        5: "A54499",
        6: "00AEEF",
        7: "00AA4F",
        9: "A2BCCF",
        12: "0073AE",
        15: "49176D",
        16: "B3AA7E",
        17: "77AE99",
        21: "7C3F25",
        22: "FFC20E",
        23: "A3BADC",
        24: "ED1D8F",
        26: "F49AC1",
        31: "BF83B9",
        32: "EC1D8D",
        33: "367D0F",
        34: "FFC10E",
        35: "F78B1F",
        39: "0073AD",
        40: "49176D",
        66: "0D4D8B",
    }
)

# Named routes without a number get ids well above the numbered range.
ROUTE_ID_OVERRIDES = MappingProxyType(
    {
        "FAIR": 1_001,
    }
)

# 2023-12-26: route 26 headsigns are not descriptive in the feed.
NON_DESCRIPTIVE_HEADSIGN_ROUTES = frozenset({26})
