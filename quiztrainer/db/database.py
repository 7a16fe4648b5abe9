from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Engine, create_engine, select
from sqlalchemy.orm import Session, sessionmaker

from quiztrainer.db.models import Base, Quiz

# Inserted into an empty store on first start
STARTER_QUIZZES: list[tuple[str, str]] = [
    ("Capital of Italy", "Rome"),
    ("Capital of France", "Paris"),
    ("Capital of Spain", "Madrid"),
    ("Capital of Portugal", "Lisbon"),
]


def create_session_factory(database_url: str, echo: bool = False) -> sessionmaker[Session]:
    """Build an engine for the given URL and return a session factory bound to it."""
    engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_engine(factory: sessionmaker[Session]) -> Engine:
    """Get the engine a session factory is bound to."""
    return factory.kw["bind"]


def init_db(factory: sessionmaker[Session], seed: bool = False) -> int:
    """
    Initialize database tables.

    Args:
        factory: Session factory for the target database
        seed: Insert the starter quizzes when the table is empty

    Returns:
        Number of quizzes inserted by seeding
    """
    Base.metadata.create_all(bind=get_engine(factory))
    logger.info("Database tables initialized")

    if not seed:
        return 0

    with session_scope(factory) as session:
        if session.scalars(select(Quiz.id).limit(1)).first() is not None:
            return 0
        session.add_all(Quiz(question=q, answer=a) for q, a in STARTER_QUIZZES)

    logger.info(f"Seeded {len(STARTER_QUIZZES)} starter quizzes")
    return len(STARTER_QUIZZES)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:  # Intentionally broad - rollback on any error before re-raising
        session.rollback()
        raise
    finally:
        session.close()
