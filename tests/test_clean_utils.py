import pytest

from transit_labels import clean_utils


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Main St", "Main Street"),
        ("Stanley Ave.", "Stanley Avenue"),
        ("Fraser Hwy", "Fraser Highway"),
        ("St Andrews Rd", "St Andrews Road"),
        ("Main Street", "Main Street"),
        ("Stanley", "Stanley"),
    ],
)
def test_clean_street_types_expands_trailing_abbreviations(raw, expected):
    assert clean_utils.clean_street_types(raw) == expected


def test_clean_at_unifies_at_sign_and_word():
    assert clean_utils.clean_at("Main St @ Bay A") == "Main St at Bay A"
    assert clean_utils.clean_at("Main St@Bay") == "Main St at Bay"
    assert clean_utils.clean_at("Sumas Way AT Marshall") == "Sumas Way at Marshall"
    assert clean_utils.clean_at("Atkinson Rd") == "Atkinson Rd"


def test_clean_and_only_touches_whole_words():
    assert clean_utils.clean_and("Langley and Aldergrove") == "Langley & Aldergrove"
    assert clean_utils.clean_and("Sandy Hill") == "Sandy Hill"


def test_clean_bounds_drops_direction_tokens_and_empty_brackets():
    assert clean_utils.clean_bounds("Clearbrook Rd NB").strip() == "Clearbrook Rd"
    assert clean_utils.clean_bounds("Clearbrook Rd (Southbound)").strip() == "Clearbrook Rd"
    assert clean_utils.clean_bounds("Webster Rd") == "Webster Rd"


def test_keep_to_and_remove_via():
    assert clean_utils.keep_to_and_remove_via("Mission via Sumas").strip() == "Mission"
    assert clean_utils.keep_to_and_remove_via("Downtown to UFV via Marshall").strip() == "UFV"
    # nothing would be left, so the clause stays
    assert clean_utils.keep_to_and_remove_via("via Sumas") == "via Sumas"
    assert clean_utils.keep_to_and_remove_via("Tolmie") == "Tolmie"


def test_clean_slashes_and_numbers():
    assert clean_utils.clean_slashes("Bourquin/Downtown") == "Bourquin / Downtown"
    assert clean_utils.clean_numbers("1ST Ave") == "1st Ave"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  main   street  ", "Main Street"),
        ("UFV EXCHANGE", "UFV Exchange"),
        ("( Mission )", "(Mission)"),
        ("Mission -", "Mission"),
        ("Main Street AT Bay", "Main Street at Bay"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_clean_label(raw, expected):
    assert clean_utils.clean_label(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("SOUTH FRASER WAY AT MARSHALL RD", "South Fraser Way At Marshall Rd"),
        ("UFV EXCHANGE", "UFV Exchange"),
        ("CLEARBROOK RD (SOUTHBOUND)", "Clearbrook Rd (Southbound)"),
        ("Huntingdon RD", "Huntingdon RD"),
        ("", ""),
    ],
)
def test_clean_upper_case_only_rewrites_all_caps_labels(raw, expected):
    assert clean_utils.clean_upper_case(raw) == expected
