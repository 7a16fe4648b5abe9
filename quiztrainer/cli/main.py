"""
Quiz Trainer CLI

Usage:
    quiztrainer                  # Open the interactive shell
    quiztrainer shell            # Same, explicitly
    quiztrainer play             # Play one session and exit
    quiztrainer init-db --seed   # Create tables and starter quizzes

Configuration comes from environment variables or a .env file (see
config.py); --database-url and --log-level override it for one run.
"""

from __future__ import annotations

import sys
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console

from config import Settings, get_settings
from quiztrainer.cli.commands import QuizCommands
from quiztrainer.cli.shell import QuizShell
from quiztrainer.db.database import create_session_factory, init_db
from quiztrainer.db.store import QuizStore
from quiztrainer.delivery.channel import ConsoleChannel
from quiztrainer.delivery.output import Output
from quiztrainer.play.engine import Outcome

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="quiztrainer",
    help="Interactive command-line quiz trainer",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(highlight=False)


def configure_logging(settings: Settings) -> None:
    """Send loguru output to stderr, and to a rotating file when configured."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )


def build_commands(settings: Settings) -> QuizCommands:
    """Open the configured store and wire the handlers to the terminal."""
    factory = create_session_factory(settings.database_url, echo=settings.log_level == "DEBUG")
    init_db(factory, seed=settings.seed_quizzes)
    out = Output(console)
    return QuizCommands(
        store=QuizStore(factory),
        channel=ConsoleChannel(console),
        out=out,
        authors=settings.credits_authors,
    )


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    database_url: Annotated[
        Optional[str], typer.Option("--database-url", "-d", help="SQLAlchemy URL of the quiz store")
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR")
    ] = None,
) -> None:
    """
    Interactive command-line quiz trainer.

    Without a command, opens the interactive shell.
    """
    overrides = {}
    if database_url:
        overrides["database_url"] = database_url
    if log_level:
        overrides["log_level"] = log_level
    settings = get_settings()
    if overrides:
        settings = Settings.model_validate({**settings.model_dump(), **overrides})

    configure_logging(settings)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        shell(ctx)


@app.command()
def shell(ctx: typer.Context) -> None:
    """Open the interactive quiz shell."""
    settings: Settings = ctx.obj
    commands = build_commands(settings)
    QuizShell(commands, prompt=settings.prompt).cmdloop()


@app.command()
def play(ctx: typer.Context) -> None:
    """Play one session and exit with status 0 on a win, 1 otherwise."""
    settings: Settings = ctx.obj
    commands = build_commands(settings)
    commands.play()
    result = commands.last_play
    if result is None or result.outcome is not Outcome.WIN:
        raise typer.Exit(code=1)


@app.command("init-db")
def init_db_command(
    ctx: typer.Context,
    seed: Annotated[bool, typer.Option("--seed/--no-seed", help="Insert starter quizzes into an empty store")] = True,
) -> None:
    """Create the quiz table (and starter quizzes)."""
    settings: Settings = ctx.obj
    factory = create_session_factory(settings.database_url)
    inserted = init_db(factory, seed=seed)
    console.print(f"[green][OK][/green] Database ready at {settings.database_url} ({inserted} quizzes seeded)")


# =============================================================================
# Entry Point
# =============================================================================

def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
