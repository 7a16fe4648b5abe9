"""
Core Module - Shared helpers with no I/O.

Components:
- errors: QuizError taxonomy raised by the store, channel and handlers
- normalize: answer canonicalization and comparison
- ids: command-line identifier parsing
"""

from quiztrainer.core.errors import (
    ChannelFailure,
    MissingArgument,
    NotANumber,
    NotFound,
    QuizError,
    ValidationFailed,
)
from quiztrainer.core.ids import parse_quiz_id
from quiztrainer.core.normalize import answers_match, normalize

__all__ = [
    "ChannelFailure",
    "MissingArgument",
    "NotANumber",
    "NotFound",
    "QuizError",
    "ValidationFailed",
    "answers_match",
    "normalize",
    "parse_quiz_id",
]
