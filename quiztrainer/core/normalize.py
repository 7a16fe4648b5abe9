"""
Answer normalization.

Answers are compared after stripping all whitespace, lower-casing and
removing the acute accent from vowels. Nothing fuzzier than that: no partial
credit, substrings or edit distance.
"""

from __future__ import annotations

import re
from typing import Callable

_WHITESPACE = re.compile(r"\s+")
_ACCENTS = str.maketrans("áéíóú", "aeiou")

Normalizer = Callable[[str], str]


def normalize(text: str) -> str:
    """Canonical form of an answer: no whitespace, lower case, no acute accents."""
    text = _WHITESPACE.sub("", text)
    # lower() first so upper-case accented vowels are covered by the table
    return text.lower().translate(_ACCENTS)


def answers_match(given: str, expected: str, normalizer: Normalizer = normalize) -> bool:
    """True when both answers have the same normalized form."""
    return normalizer(given) == normalizer(expected)
