"""
Command-line interface: typer entry point, cmd.Cmd shell and command handlers.
"""
