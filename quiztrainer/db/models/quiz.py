"""
Quiz table.

A quiz is a question/answer pair with a store-assigned integer id. Ids are
never reused by position, so they may be sparse after deletions.

Validation:
- question must not be blank
- answer must not be blank
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from quiztrainer.core.errors import ValidationFailed

from .base import Base


class Quiz(Base):
    """A single trivia question and its expected answer."""

    __tablename__ = "quizzes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(default=func.now())
    updated_at: Mapped[datetime] = mapped_column(default=func.now(), onupdate=func.now())

    @validates("question")
    def _validate_question(self, key: str, value: str) -> str:
        if value is None or not value.strip():
            raise ValidationFailed(["Question must not be empty."])
        return value

    @validates("answer")
    def _validate_answer(self, key: str, value: str) -> str:
        if value is None or not value.strip():
            raise ValidationFailed(["Answer must not be empty."])
        return value

    def __repr__(self) -> str:
        return f"<Quiz id={self.id} question={self.question!r}>"
