"""
Quiz store: create/read/update/delete access to the quizzes table.

Every operation runs in its own transactional scope and hands back immutable
QuizRecord snapshots, never live ORM objects, so callers can hold a record
after the session is closed.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from quiztrainer.core.errors import NotFound, ValidationFailed
from quiztrainer.db.database import session_scope
from quiztrainer.db.models import Quiz

# Integer primary keys are signed 64-bit; larger ids cannot be stored
MAX_QUIZ_ID = 2**63 - 1
MIN_QUIZ_ID = -(2**63)


@dataclass(frozen=True)
class QuizRecord:
    """Snapshot of a stored quiz."""

    id: int
    question: str
    answer: str

    @classmethod
    def from_row(cls, row: Quiz) -> "QuizRecord":
        return cls(id=row.id, question=row.question, answer=row.answer)


def validate_quiz(question: str | None, answer: str | None) -> None:
    """Raise ValidationFailed listing every blank field."""
    errors = []
    if question is None or not question.strip():
        errors.append("Question must not be empty.")
    if answer is None or not answer.strip():
        errors.append("Answer must not be empty.")
    if errors:
        raise ValidationFailed(errors)


class QuizStore:
    """Durable collection of quizzes keyed by integer id."""

    def __init__(self, factory: sessionmaker[Session]):
        self.factory = factory

    @staticmethod
    def _check_id(quiz_id: int) -> None:
        if not MIN_QUIZ_ID <= quiz_id <= MAX_QUIZ_ID:
            raise NotFound(quiz_id)

    def create(self, question: str, answer: str) -> QuizRecord:
        """Insert a new quiz and return it with its assigned id."""
        validate_quiz(question, answer)
        with session_scope(self.factory) as session:
            row = Quiz(question=question, answer=answer)
            session.add(row)
            session.flush()
            record = QuizRecord.from_row(row)
        logger.info(f"Created quiz {record.id}")
        return record

    def get_by_id(self, quiz_id: int) -> QuizRecord:
        """Fetch one quiz; raises NotFound if absent."""
        self._check_id(quiz_id)
        with session_scope(self.factory) as session:
            row = session.get(Quiz, quiz_id)
            if row is None:
                raise NotFound(quiz_id)
            return QuizRecord.from_row(row)

    def update(self, quiz_id: int, question: str, answer: str) -> QuizRecord:
        """Replace question and answer of an existing quiz."""
        validate_quiz(question, answer)
        self._check_id(quiz_id)
        with session_scope(self.factory) as session:
            row = session.get(Quiz, quiz_id)
            if row is None:
                raise NotFound(quiz_id)
            row.question = question
            row.answer = answer
            session.flush()
            record = QuizRecord.from_row(row)
        logger.info(f"Updated quiz {quiz_id}")
        return record

    def delete_by_id(self, quiz_id: int) -> None:
        """Remove a quiz; raises NotFound if absent."""
        self._check_id(quiz_id)
        with session_scope(self.factory) as session:
            row = session.get(Quiz, quiz_id)
            if row is None:
                raise NotFound(quiz_id)
            session.delete(row)
        logger.info(f"Deleted quiz {quiz_id}")

    def list_all(self) -> list[QuizRecord]:
        """All quizzes ordered by id."""
        with session_scope(self.factory) as session:
            rows = session.scalars(select(Quiz).order_by(Quiz.id)).all()
            return [QuizRecord.from_row(row) for row in rows]

    def list_ids(self) -> list[int]:
        """Ids of all quizzes ordered by id."""
        with session_scope(self.factory) as session:
            return list(session.scalars(select(Quiz.id).order_by(Quiz.id)).all())

    def count(self) -> int:
        with session_scope(self.factory) as session:
            return session.scalar(select(func.count()).select_from(Quiz)) or 0
