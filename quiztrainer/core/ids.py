"""
Identifier parsing for shell arguments.

Ids typed at the prompt are parsed the lenient way: surrounding whitespace is
ignored and trailing text after the leading digits is dropped ("7th" -> 7,
"3.9" -> 3). Only ASCII digits count. A value without leading digits is
rejected.
"""

from __future__ import annotations

import re
from typing import Optional

from quiztrainer.core.errors import MissingArgument, NotANumber

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_quiz_id(arg: Optional[str], name: str = "id") -> int:
    """
    Parse a command argument into a quiz id.

    Args:
        arg: Raw argument text from the shell (None or blank when absent)
        name: Parameter name used in error messages

    Returns:
        The parsed integer id

    Raises:
        MissingArgument: If no argument was given
        NotANumber: If the argument does not start with an integer
    """
    if arg is None or not arg.strip():
        raise MissingArgument(name)

    # Only the first word is the id; extra words are ignored
    first = arg.split()[0]
    match = _LEADING_INT.match(first)
    if match is None:
        raise NotANumber(first, name)
    return int(match.group(1))
