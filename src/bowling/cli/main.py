"""Main CLI application and entry point.

This module defines the main Typer application and aggregates all
command groups (game, config).
"""

import typer

from bowling.cli.commands import config as config_commands
from bowling.cli.commands import game as game_commands

app = typer.Typer(
    name="bowling",
    help="Command line client for the bowling scoring service",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

app.add_typer(game_commands.app, name="game", help="Create games and submit rolls")
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback() -> None:
    """Bowling scoring service CLI.

    Use the subcommands to create games, inspect them, submit rolls
    and manage client configuration files.
    """
    pass


if __name__ == "__main__":
    app()
