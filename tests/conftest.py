"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import io
import random
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quiztrainer.cli.commands import QuizCommands
from quiztrainer.core.errors import ChannelFailure
from quiztrainer.db.database import create_session_factory, init_db
from quiztrainer.db.store import QuizStore
from quiztrainer.delivery.output import Output


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class ScriptedChannel:
    """Prompt channel that replies from a fixed script and records every prompt."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.prompts = []
        self.prefills = []

    def ask(self, text, prefill=""):
        self.prompts.append(text)
        self.prefills.append(prefill)
        if not self.replies:
            raise ChannelFailure("No more scripted input.")
        return self.replies.pop(0).strip()


class RecordingOutput(Output):
    """Output that renders into a string buffer without colors."""

    def __init__(self):
        super().__init__(Console(file=io.StringIO(), width=120, color_system=None, highlight=False))
        self.errors = []

    def error_line(self, text):
        self.errors.append(text)
        super().error_line(text)

    @property
    def text(self):
        return self.console.file.getvalue()


@pytest.fixture
def db_url(tmp_path):
    """SQLite database in a per-test temporary directory."""
    return f"sqlite:///{tmp_path / 'quizzes.sqlite'}"


@pytest.fixture
def store(db_url):
    """Empty quiz store."""
    factory = create_session_factory(db_url)
    init_db(factory, seed=False)
    return QuizStore(factory)


@pytest.fixture
def two_quiz_store(store):
    """Store holding the two sample quizzes, ids 1 and 2."""
    store.create("2+2?", "4")
    store.create("Capital of France?", "Paris")
    return store


@pytest.fixture
def channel():
    return ScriptedChannel()


@pytest.fixture
def out():
    return RecordingOutput()


@pytest.fixture
def commands(store, channel, out):
    """Handlers wired to the empty store, a scripted channel and a recording output."""
    return QuizCommands(
        store=store,
        channel=channel,
        out=out,
        rng=random.Random(1234),
        authors=["Ada Lovelace"],
    )

