"""
Play session engine.

Asks every stored quiz once, in random order, until the player gets one
wrong or there is nothing left to ask.

The engine is an explicit state machine and never reads input itself:

    IDLE --start()--> AWAITING_ANSWER --answer()--> AWAITING_ANSWER
                          |                          |
                          +--------------------------+--> FINISHED

start() snapshots the quiz ids into the pending list and picks the first
quiz. answer() scores one reply and either picks the next quiz or finishes.
abort() finishes the session from any live state. run_play() is the driver
that owns the single outstanding prompt between those calls.

Selection is uniform over the pending list and without replacement, so a
session with N quizzes at start lasts at most N rounds and never repeats a
quiz. Quizzes added or removed while a session runs are not observed, except
that a quiz deleted before its turn aborts the session with NotFound.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from loguru import logger

from quiztrainer.core.errors import ChannelFailure, NotFound, QuizError
from quiztrainer.core.normalize import Normalizer, answers_match, normalize
from quiztrainer.db.store import QuizRecord, QuizStore
from quiztrainer.delivery.channel import PromptChannel
from quiztrainer.delivery.output import Output


class PlayState(str, Enum):
    """Where the engine is in a session."""
    IDLE = "idle"
    AWAITING_ANSWER = "awaiting_answer"
    FINISHED = "finished"


class Outcome(str, Enum):
    """How a finished session ended."""
    WIN = "win"               # Every quiz answered correctly
    LOSS = "loss"             # First wrong answer
    EXHAUSTED = "exhausted"   # Store was empty, nothing asked
    ABORTED = "aborted"       # Missing quiz or failed prompt


@dataclass
class RoundReport:
    """Result of scoring one answer."""
    quiz_id: int
    given: str
    correct: bool
    score: int


@dataclass
class SessionState:
    """Mutable state of one play session."""
    pending: list[int]
    score: int = 0
    current_quiz: Optional[QuizRecord] = None
    asked: list[int] = field(default_factory=list)


@dataclass
class PlayResult:
    """Summary handed back to the shell when a session ends."""
    outcome: Outcome
    score: int
    asked: list[int]
    error: Optional[QuizError] = None

    @property
    def rounds(self) -> int:
        return len(self.asked)


def question_prompt(question: str) -> str:
    """Prompt text for a quiz question, always ending in '? '."""
    question = question.rstrip()
    if not question.endswith("?"):
        question += "?"
    return question + " "


class PlayEngine:
    """State machine for one randomized play session."""

    def __init__(
        self,
        store: QuizStore,
        normalizer: Normalizer = normalize,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.normalizer = normalizer
        self.rng = rng or random.Random()
        self.state = PlayState.IDLE
        self.outcome: Optional[Outcome] = None
        self.error: Optional[QuizError] = None
        self.session: Optional[SessionState] = None

    # ========================================
    # Queries
    # ========================================

    @property
    def current_quiz(self) -> Optional[QuizRecord]:
        return self.session.current_quiz if self.session else None

    @property
    def score(self) -> int:
        return self.session.score if self.session else 0

    @property
    def is_finished(self) -> bool:
        return self.state is PlayState.FINISHED

    def result(self) -> PlayResult:
        """Summary of a finished session."""
        if not self.is_finished:
            raise RuntimeError("Play session has not finished yet")
        return PlayResult(
            outcome=self.outcome,
            score=self.score,
            asked=list(self.session.asked) if self.session else [],
            error=self.error,
        )

    # ========================================
    # Transitions
    # ========================================

    def start(self) -> Optional[QuizRecord]:
        """
        Snapshot the store and pick the first quiz.

        Returns:
            The first quiz to ask, or None when the session finished at once
            (empty store, or the first quiz vanished before it was fetched)
        """
        if self.state is not PlayState.IDLE:
            raise RuntimeError(f"Cannot start a play session in state {self.state.value}")

        self.session = SessionState(pending=list(self.store.list_ids()))
        logger.info(f"Play session started with {len(self.session.pending)} quizzes")

        if not self.session.pending:
            self._finish(Outcome.EXHAUSTED)
            return None

        self._select_next()
        return self.current_quiz

    def answer(self, text: str) -> RoundReport:
        """
        Score the reply to the current quiz.

        A correct reply adds one point and moves on to the next quiz, or wins
        the session when none are left. A wrong reply ends the session.
        """
        if self.state is not PlayState.AWAITING_ANSWER:
            raise RuntimeError(f"No question is waiting for an answer (state {self.state.value})")

        quiz = self.session.current_quiz
        self.session.current_quiz = None
        correct = answers_match(text, quiz.answer, self.normalizer)
        if correct:
            self.session.score += 1
        report = RoundReport(quiz_id=quiz.id, given=text, correct=correct, score=self.session.score)
        logger.debug(f"Quiz {quiz.id} answered {'correctly' if correct else 'incorrectly'}")

        if not correct:
            self._finish(Outcome.LOSS)
        elif not self.session.pending:
            self._finish(Outcome.WIN)
        else:
            self._select_next()
        return report

    def abort(self, error: QuizError) -> None:
        """End the session early, keeping the score earned so far."""
        if self.is_finished:
            return
        if self.session is None:
            self.session = SessionState(pending=[])
        self.session.current_quiz = None
        self.error = error
        logger.warning(f"Play session aborted: {error}")
        self._finish(Outcome.ABORTED)

    # ========================================
    # Internals
    # ========================================

    def _select_next(self) -> None:
        pending = self.session.pending
        quiz_id = pending.pop(self.rng.randrange(len(pending)))
        try:
            self.session.current_quiz = self.store.get_by_id(quiz_id)
        except NotFound as e:
            self.abort(e)
            return
        self.session.asked.append(quiz_id)
        self.state = PlayState.AWAITING_ANSWER

    def _finish(self, outcome: Outcome) -> None:
        self.state = PlayState.FINISHED
        self.outcome = outcome
        logger.info(f"Play session finished: {outcome.value}, score {self.score}")


def run_play(engine: PlayEngine, channel: PromptChannel, out: Output) -> PlayResult:
    """
    Drive a play session on the terminal until it finishes.

    Issues one prompt per round, prints a line per answer and reports the
    final score exactly once.
    """
    quiz = engine.start()
    while quiz is not None:
        try:
            reply = channel.ask(question_prompt(quiz.question))
        except ChannelFailure as e:
            engine.abort(e)
            break

        report = engine.answer(reply)
        if report.correct:
            out.line(f"{out.style('CORRECT', 'green')} - {report.score} correct answers so far.")
        else:
            out.line(out.style("INCORRECT.", "red"))
        quiz = engine.current_quiz

    result = engine.result()
    if result.outcome is Outcome.ABORTED:
        out.error_line(str(result.error))
    elif result.outcome is Outcome.EXHAUSTED:
        out.line("There are no quizzes to ask.")
    elif result.outcome is Outcome.WIN:
        out.line("Nothing more to ask.")

    out.line(f"End of game. Correct answers: {result.score}")
    out.banner(str(result.score), "magenta")
    return result
