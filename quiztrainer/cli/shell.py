"""
Interactive quiz shell.

A cmd.Cmd loop that dispatches each line to QuizCommands. Handlers report
their own errors, so a failing command always comes back to the prompt.
"""
from __future__ import annotations

import cmd

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from quiztrainer.cli.commands import QuizCommands


class QuizShell(cmd.Cmd):
    """Interactive quiz trainer shell."""

    intro = None  # We'll show custom intro

    def __init__(self, commands: QuizCommands, prompt: str = "quiz > ", console: Console | None = None):
        super().__init__()
        self.commands = commands
        self.prompt = prompt
        self.console = console or commands.out.console

    def preloop(self):
        """Show welcome banner."""
        banner = Text()
        banner.append("Quiz Trainer\n", style="bold cyan")
        banner.append("Type 'help' to see the commands.", style="dim")
        self.console.print(Panel(banner, border_style="blue", padding=(1, 2), expand=False))

    def emptyline(self):
        """Do nothing (cmd.Cmd would repeat the last command)."""
        return False

    def default(self, line):
        word = line.split()[0] if line.split() else line
        self.commands.out.error_line(f"Unknown command: '{word}'")
        self.commands.out.line("Use 'help' to see the available commands.")
        return False

    # ========================================
    # QUIZ COMMANDS
    # ========================================

    def do_help(self, arg):
        """Show the available commands."""
        return self.commands.help()

    def do_h(self, arg):
        """Alias for help."""
        return self.commands.help()

    def do_list(self, arg):
        """List the existing quizzes."""
        return self.commands.list_quizzes()

    def do_show(self, arg):
        """Show a quiz. Usage: show <id>"""
        return self.commands.show(arg)

    def do_add(self, arg):
        """Add a new quiz interactively."""
        return self.commands.add()

    def do_delete(self, arg):
        """Delete a quiz. Usage: delete <id>"""
        return self.commands.delete(arg)

    def do_edit(self, arg):
        """Edit a quiz. Usage: edit <id>"""
        return self.commands.edit(arg)

    def do_test(self, arg):
        """Try one quiz. Usage: test <id>"""
        return self.commands.test(arg)

    def do_play(self, arg):
        """Answer every quiz in random order until the first mistake."""
        return self.commands.play()

    def do_p(self, arg):
        """Alias for play."""
        return self.commands.play()

    def do_credits(self, arg):
        """Show the authors."""
        return self.commands.credits()

    # ========================================
    # EXIT
    # ========================================

    def do_quit(self, arg):
        """Quit the program."""
        return self.commands.quit()

    def do_q(self, arg):
        """Alias for quit."""
        return self.commands.quit()

    def do_EOF(self, arg):
        """End of input quits."""
        self.console.print()
        return self.commands.quit()
