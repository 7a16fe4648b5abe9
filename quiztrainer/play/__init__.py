"""
Play mode: ask every quiz once in random order until the first mistake.
"""

from quiztrainer.play.engine import (
    Outcome,
    PlayEngine,
    PlayResult,
    PlayState,
    RoundReport,
    question_prompt,
    run_play,
)

__all__ = [
    "Outcome",
    "PlayEngine",
    "PlayResult",
    "PlayState",
    "RoundReport",
    "question_prompt",
    "run_play",
]
