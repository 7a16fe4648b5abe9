"""
Terminal output helpers.

Plain lines, large banners and error lines, all rendered with rich. Text
passed to line() is rich markup; user-entered text must go through style()
or rich.markup.escape() first so brackets in a question are printed as-is.
"""

from __future__ import annotations

from rich import box
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text


class Output:
    """Line-oriented output on a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def line(self, text: str = "") -> None:
        self.console.print(text)

    def banner(self, text: str, style: str = "green") -> None:
        """Print text large and centered inside a heavy panel."""
        content = Text(text.upper(), style=f"bold {style}", justify="center")
        self.console.print(
            Panel(
                Align.center(content),
                border_style=style,
                box=box.HEAVY,
                padding=(1, 4),
                expand=False,
            )
        )

    def error_line(self, text: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(text)}")

    @staticmethod
    def style(text: object, color: str) -> str:
        """Wrap text in rich markup for the given color."""
        return f"[{color}]{escape(str(text))}[/{color}]"
