"""Generic label cleaners shared by every agency.

All functions take and return ``str`` and never fail on unmatched input: a
pattern that does not match leaves the text untouched.
"""

from __future__ import annotations

import re

from label_tables.street_types import BOUND_TOKENS, LOWER_CASE_WORDS, SHORT_WORDS, STREET_TYPES

_SPACES = re.compile(r"\s+")
_SPACE_AFTER_OPEN = re.compile(r"([(\[])\s+")
_SPACE_BEFORE_CLOSE = re.compile(r"\s+([)\]])")
_EMPTY_BRACKETS = re.compile(r"\(\s*\)|\[\s*\]")
_DANGLING_SEPARATORS = " -,;"


def clean_words(*words: str) -> "re.Pattern[str]":
    """Compile a case-insensitive pattern matching any of ``words`` as whole words.

    Group 1 captures the character before the word (or nothing at the start of
    the string) so callers can keep it with ``\\1``.
    """
    alternatives = "|".join(words)
    return re.compile(r"(^|\W)(?:" + alternatives + r")(?=\W|$)", re.IGNORECASE)


CLEAN_AND = clean_words("and")
CLEAN_AND_REPLACEMENT = r"\1&"

_AT_SIGN = re.compile(r"\s*@\s*")
CLEAN_AT = clean_words("at")
CLEAN_AT_REPLACEMENT = r"\1at"

_BOUNDS = clean_words(*BOUND_TOKENS)

_SLASHES = re.compile(r"(?<=\S)\s*/\s*(?=\S)")
_ORDINALS = re.compile(r"\b(\d+)(st|nd|rd|th)\b", re.IGNORECASE)

_STREET_TYPE_LOOKUP = {abbreviation.lower(): full for abbreviation, full in STREET_TYPES.items()}
_STREET_TYPES = re.compile(
    r"(?<=\w )("
    + "|".join(sorted(STREET_TYPES, key=len, reverse=True))
    + r")\b\.?",
    re.IGNORECASE,
)

_TO = re.compile(r"(?:^|\W)to(?:\W|$)", re.IGNORECASE)
_VIA = re.compile(r"(?:^|\s)via(?:\s|$)", re.IGNORECASE)


def clean_and(text: str) -> str:
    return CLEAN_AND.sub(CLEAN_AND_REPLACEMENT, text)


def clean_at(text: str) -> str:
    """Rewrite ``@`` and any casing of the word "at" to a lower-case ``at``."""
    text = _AT_SIGN.sub(" at ", text)
    return CLEAN_AT.sub(CLEAN_AT_REPLACEMENT, text)


def clean_bounds(text: str) -> str:
    """Drop direction-of-travel decorations such as ``EB`` or ``(Northbound)``."""
    text = _BOUNDS.sub(r"\1", text)
    return _EMPTY_BRACKETS.sub("", text)


def clean_slashes(text: str) -> str:
    return _SLASHES.sub(" / ", text)


def clean_numbers(text: str) -> str:
    return _ORDINALS.sub(lambda match: match.group(1) + match.group(2).lower(), text)


def clean_street_types(text: str) -> str:
    """Expand street-type abbreviations that follow another word (``Main St`` -> ``Main Street``)."""
    return _STREET_TYPES.sub(lambda match: _STREET_TYPE_LOOKUP[match.group(1).lower()], text)


def keep_to_and_remove_via(text: str) -> str:
    """Reduce ``A to B via C`` to ``B``.

    A clause is only dropped when something other than whitespace is left behind.
    """
    via = _VIA.search(text)
    if via and text[: via.start()].strip():
        text = text[: via.start()]
    to = _TO.search(text)
    if to and text[to.end():].strip():
        text = text[to.end():]
    return text


_KNOWN_SHORT_WORDS = LOWER_CASE_WORDS | SHORT_WORDS | frozenset(_STREET_TYPE_LOOKUP)
_FIRST_LETTER = re.compile(r"[a-z]")


def _title_word(word: str) -> str:
    if len(word) > 3 or word.lower().rstrip(".") in _KNOWN_SHORT_WORDS:
        return _FIRST_LETTER.sub(lambda match: match.group().upper(), word.lower(), count=1)
    return word


def clean_upper_case(text: str) -> str:
    """Title-case an all-caps label before other rewrites mix cases into it.

    "SOUTH FRASER WAY AT MARSHALL RD" -> "South Fraser Way At Marshall Rd". Other short
    words are taken for acronyms and kept ("UFV EXCHANGE" -> "UFV Exchange").
    """
    if not text.isupper():
        return text
    return " ".join(_title_word(word) for word in text.split(" "))


def _capitalize(word: str, first: bool) -> str:
    if not first and word.lower() in LOWER_CASE_WORDS:
        return word.lower()
    if word[:1].isalpha():
        return word[0].upper() + word[1:]
    return word


def clean_label(label: str) -> str:
    """Collapse whitespace, trim dangling separators and normalize word casing."""
    label = _SPACES.sub(" ", label)
    label = _SPACE_AFTER_OPEN.sub(r"\1", label)
    label = _SPACE_BEFORE_CLOSE.sub(r"\1", label)
    label = label.strip(_DANGLING_SEPARATORS)
    if not label:
        return ""
    label = clean_upper_case(label)
    words = label.split(" ")
    return " ".join(_capitalize(word, index == 0) for index, word in enumerate(words))
