"""
Error taxonomy for the quiz trainer.

Command handlers catch QuizError at the shell boundary and print one message
per error. The play engine converts NotFound and ChannelFailure into an
aborted session.
"""

from __future__ import annotations


class QuizError(Exception):
    """Base class for every user-facing quiz trainer error."""


class MissingArgument(QuizError):
    """A command that needs an argument was called without one."""

    def __init__(self, name: str = "id"):
        self.name = name
        super().__init__(f"Missing parameter <{name}>.")


class NotANumber(QuizError):
    """An identifier argument could not be parsed as an integer."""

    def __init__(self, value: str, name: str = "id"):
        self.value = value
        self.name = name
        super().__init__(f"The value of parameter <{name}> is not a number: {value!r}.")


class NotFound(QuizError):
    """No quiz is stored under the requested identifier."""

    def __init__(self, quiz_id: int):
        self.quiz_id = quiz_id
        super().__init__(f"There is no quiz with id={quiz_id}.")


class ValidationFailed(QuizError):
    """A quiz failed validation before being written to the store."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "The quiz is invalid.")


class ChannelFailure(QuizError):
    """Reading a line from the prompt channel failed."""
