"""
Quiz Trainer - interactive command-line quiz practice.

Packages:
- core: answer normalization, id parsing, error taxonomy
- db: SQLAlchemy quiz store
- delivery: terminal output and prompt channel
- play: randomized play-session engine
- cli: command handlers, interactive shell, typer entry point
"""

__version__ = "1.0.0"
