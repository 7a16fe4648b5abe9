"""
Command handlers for the interactive shell.

One method per shell command. Every handler catches its own errors, prints
exactly one message for each, and returns to the shell: False to show the
prompt again, True to end the program.
"""

from __future__ import annotations

import functools
import random
from typing import Callable, Optional

from loguru import logger
from rich.markup import escape
from sqlalchemy.exc import SQLAlchemyError

from quiztrainer.core.errors import QuizError, ValidationFailed
from quiztrainer.core.ids import parse_quiz_id
from quiztrainer.core.normalize import Normalizer, answers_match, normalize
from quiztrainer.db.store import QuizRecord, QuizStore
from quiztrainer.delivery.channel import PromptChannel
from quiztrainer.delivery.output import Output
from quiztrainer.play.engine import PlayEngine, PlayResult, question_prompt, run_play

HELP_LINES = [
    ("h|help", "Show this help."),
    ("list", "List the existing quizzes."),
    ("show <id>", "Show the question and answer of the given quiz."),
    ("add", "Add a new quiz interactively."),
    ("delete <id>", "Delete the given quiz."),
    ("edit <id>", "Edit the given quiz."),
    ("test <id>", "Try the given quiz."),
    ("p|play", "Play: answer every quiz in random order."),
    ("credits", "Credits."),
    ("q|quit", "Quit the program."),
]


def handles_errors(method: Callable[..., Optional[bool]]) -> Callable[..., bool]:
    """Report QuizError and storage errors once and always hand control back."""

    @functools.wraps(method)
    def wrapper(self: "QuizCommands", *args, **kwargs) -> bool:
        try:
            return bool(method(self, *args, **kwargs))
        except ValidationFailed as e:
            logger.warning(f"{method.__name__}: validation failed: {e.messages}")
            self.out.error_line("The quiz is invalid:")
            for message in e.messages:
                self.out.line(f"  {self.out.style(message, 'red')}")
        except QuizError as e:
            logger.warning(f"{method.__name__}: {e}")
            self.out.error_line(str(e))
        except SQLAlchemyError as e:
            logger.exception(f"{method.__name__}: storage error")
            self.out.error_line(f"Storage error: {e}")
        return False

    return wrapper


class QuizCommands:
    """Handlers for every shell command, bound to one store and one terminal."""

    def __init__(
        self,
        store: QuizStore,
        channel: PromptChannel,
        out: Output,
        normalizer: Normalizer = normalize,
        rng: Optional[random.Random] = None,
        authors: Optional[list[str]] = None,
    ):
        self.store = store
        self.channel = channel
        self.out = out
        self.normalizer = normalizer
        self.rng = rng
        self.authors = authors or []
        self.last_play: Optional[PlayResult] = None

    def _format_quiz(self, quiz: QuizRecord, with_answer: bool = True) -> str:
        text = f" [{self.out.style(quiz.id, 'magenta')}]:  {escape(quiz.question)}"
        if with_answer:
            text += f" {self.out.style('=>', 'magenta')} {escape(quiz.answer)}"
        return text

    # ========================================
    # Read-only commands
    # ========================================

    @handles_errors
    def help(self) -> None:
        self.out.line("Commands:")
        for usage, text in HELP_LINES:
            self.out.line(f"  {usage} - {text}")

    @handles_errors
    def list_quizzes(self) -> None:
        quizzes = self.store.list_all()
        if not quizzes:
            self.out.line("There are no quizzes yet. Use 'add' to create one.")
            return
        for quiz in quizzes:
            self.out.line(self._format_quiz(quiz, with_answer=False))

    @handles_errors
    def show(self, arg: Optional[str] = None) -> None:
        quiz = self.store.get_by_id(parse_quiz_id(arg))
        self.out.line(self._format_quiz(quiz))

    @handles_errors
    def credits(self) -> None:
        self.out.line("Authors:")
        for author in self.authors:
            self.out.line(f"  {self.out.style(author, 'green')}")

    # ========================================
    # Editing commands
    # ========================================

    @handles_errors
    def add(self) -> None:
        question = self.channel.ask("Enter a question: ")
        answer = self.channel.ask("Enter the answer: ")
        quiz = self.store.create(question, answer)
        self.out.line(f" {self.out.style('Added', 'magenta')}: {self._format_quiz(quiz).lstrip()}")

    @handles_errors
    def delete(self, arg: Optional[str] = None) -> None:
        quiz_id = parse_quiz_id(arg)
        self.store.delete_by_id(quiz_id)
        self.out.line(f" Deleted quiz {self.out.style(quiz_id, 'magenta')}.")

    @handles_errors
    def edit(self, arg: Optional[str] = None) -> None:
        quiz = self.store.get_by_id(parse_quiz_id(arg))
        question = self.channel.ask("Enter the question: ", prefill=quiz.question)
        answer = self.channel.ask("Enter the answer: ", prefill=quiz.answer)
        quiz = self.store.update(quiz.id, question, answer)
        self.out.line(f" Quiz {self.out.style(quiz.id, 'magenta')} changed to: {self._format_quiz(quiz).lstrip()}")

    # ========================================
    # Answering commands
    # ========================================

    @handles_errors
    def test(self, arg: Optional[str] = None) -> None:
        quiz = self.store.get_by_id(parse_quiz_id(arg))
        reply = self.channel.ask(question_prompt(quiz.question))
        if answers_match(reply, quiz.answer, self.normalizer):
            self.out.line("Your answer is correct.")
            self.out.banner("Correct", "green")
        else:
            self.out.line("Your answer is incorrect.")
            self.out.banner("Incorrect", "red")

    @handles_errors
    def play(self) -> None:
        engine = PlayEngine(self.store, normalizer=self.normalizer, rng=self.rng)
        self.last_play = run_play(engine, self.channel, self.out)

    # ========================================
    # Session control
    # ========================================

    def quit(self) -> bool:
        self.out.line("Bye!")
        return True
