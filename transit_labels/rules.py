"""Ordered regex rewrite rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Union

Replacement = Union[str, Callable[["re.Match[str]"], str]]
Step = Callable[[str], str]


@dataclass(frozen=True)
class NormalizationRule:
    """A compiled pattern and the replacement substituted for every match."""

    pattern: "re.Pattern[str]"
    replacement: Replacement = ""
    name: str = ""

    @classmethod
    def compile(cls, pattern: str, replacement: Replacement = "", name: str = "", flags: int = re.IGNORECASE) -> "NormalizationRule":
        return cls(re.compile(pattern, flags), replacement, name or pattern)

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)

    def __call__(self, text: str) -> str:
        return self.apply(text)


def apply_steps(steps: Iterable[Step], text: str) -> str:
    """Run ``text`` through each step left to right."""
    for step in steps:
        text = step(text)
    return text
