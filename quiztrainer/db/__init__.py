"""
Database layer: SQLAlchemy engine/session helpers and the quiz store.
"""

from quiztrainer.db.database import create_session_factory, init_db, session_scope
from quiztrainer.db.store import QuizRecord, QuizStore

__all__ = [
    "QuizRecord",
    "QuizStore",
    "create_session_factory",
    "init_db",
    "session_scope",
]
