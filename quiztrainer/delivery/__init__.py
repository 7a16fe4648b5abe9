"""
Delivery layer: everything that touches the terminal.

- output: lines, banners, error lines and color markup
- channel: single-outstanding prompt for one line of user input
"""

from quiztrainer.delivery.channel import ConsoleChannel, PromptChannel
from quiztrainer.delivery.output import Output

__all__ = ["ConsoleChannel", "Output", "PromptChannel"]
