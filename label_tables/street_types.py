"""Street-type and direction vocabularies shared by the label cleaners."""

# Abbreviation -> display form. Keys are matched case-insensitively with an optional trailing period.
STREET_TYPES = {
    "Ave": "Avenue",
    "Av": "Avenue",
    "Blvd": "Boulevard",
    "Cir": "Circle",
    "Cres": "Crescent",
    "Crt": "Court",
    "Ct": "Court",
    "Dr": "Drive",
    "Hwy": "Highway",
    "Ln": "Lane",
    "Pkwy": "Parkway",
    "Pl": "Place",
    "Rd": "Road",
    "Sq": "Square",
    "St": "Street",
    "Terr": "Terrace",
    "Wy": "Way",
}

BOUND_TOKENS = (
    "eastbound",
    "westbound",
    "northbound",
    "southbound",
    "inbound",
    "outbound",
    "eb",
    "wb",
    "nb",
    "sb",
)

# Words kept lower case by the label cleaner unless they open the label.
LOWER_CASE_WORDS = frozenset({"at", "via", "to", "of", "the", "and", "on", "in", "for"})

# Short words that read as words, not acronyms, when a feed label is all caps.
SHORT_WORDS = frozenset({"bay", "way", "old", "new", "end", "mt", "row", "gym"})
