"""
Prompt channel: ask the user for one line of text.

Only one prompt may be outstanding at a time. An interrupted read (Ctrl-C or
end of input) surfaces as ChannelFailure so callers never see a half-read
answer.
"""

from __future__ import annotations

import sys
from typing import Protocol

from loguru import logger
from rich.console import Console
from rich.markup import escape

from quiztrainer.core.errors import ChannelFailure

try:
    import readline
except ImportError:  # not available on every platform
    readline = None


class PromptChannel(Protocol):
    """Anything that can ask a question and return the trimmed reply."""

    def ask(self, text: str, prefill: str = "") -> str: ...


class ConsoleChannel:
    """Prompt channel reading from the terminal through a rich console."""

    def __init__(self, console: Console | None = None, prompt_style: str = "red"):
        self.console = console or Console(highlight=False)
        self.prompt_style = prompt_style
        self._pending = False

    def ask(self, text: str, prefill: str = "") -> str:
        """
        Show a prompt and wait for one line.

        Args:
            text: Prompt text (plain, not markup)
            prefill: Text placed in the edit buffer, when the terminal supports it

        Returns:
            The line typed by the user, stripped of surrounding whitespace
        """
        if self._pending:
            raise ChannelFailure("A prompt is already waiting for input.")

        self._pending = True
        use_prefill = bool(prefill) and readline is not None and sys.stdin.isatty()
        if use_prefill:
            readline.set_startup_hook(lambda: readline.insert_text(prefill))
        try:
            line = self.console.input(f"[{self.prompt_style}]{escape(text)}[/{self.prompt_style}]")
        except (EOFError, KeyboardInterrupt) as e:
            logger.debug(f"Prompt read interrupted: {type(e).__name__}")
            self.console.print()
            raise ChannelFailure("Input was interrupted.") from e
        finally:
            if use_prefill:
                readline.set_startup_hook()
            self._pending = False
        return line.strip()
