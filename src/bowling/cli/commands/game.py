"""Game subcommands for talking to the scoring service."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from rich.markup import escape

from bowling.cli.utils.output import console, print_error, print_resource
from bowling.client import BowlingConnectionError, BowlingHTTPClient, HttpError
from bowling.client.http_client import BowlingHTTPClientError
from bowling.config import ClientConfig

app = typer.Typer(no_args_is_help=True)

EndpointOption = Annotated[
    str | None,
    typer.Option(
        "--endpoint",
        "-e",
        help="Scoring service endpoint (overrides --config and BOWLING_API_URL)",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to a client configuration YAML file",
        exists=True,
        dir_okay=False,
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable debug logging"),
]


def load_config(endpoint: str | None, config_path: Path | None) -> ClientConfig:
    """Resolve client configuration from option, config file, then environment."""
    if config_path is not None:
        config = ClientConfig.from_yaml(config_path)
        if endpoint:
            config = ClientConfig(endpoint=endpoint, log_level=config.log_level)
        return config
    if endpoint:
        return ClientConfig(endpoint=endpoint)
    return ClientConfig.from_env()


def parse_id(value: str) -> str | int:
    """Return ASCII digit-only identifiers as int, anything else unchanged."""
    if value.isascii() and value.isdigit():
        return int(value)
    return value


def _run(
    endpoint: str | None,
    config_path: Path | None,
    verbose: bool,
    operation: Callable[[BowlingHTTPClient], Awaitable[Any]],
) -> Any:
    """Configure logging, run one client operation and map errors to exit codes."""
    try:
        config = load_config(endpoint, config_path)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    async def _call() -> Any:
        async with BowlingHTTPClient(config.endpoint) as client:
            return await operation(client)

    try:
        return asyncio.run(_call())
    except HttpError as e:
        print_error(f"HTTP {e.status}: {escape(e.message)}")
        raise typer.Exit(1)
    except BowlingConnectionError as e:
        print_error(f"Could not reach {config.endpoint}: {escape(str(e))}")
        raise typer.Exit(1)
    except BowlingHTTPClientError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)


@app.command("create")
def create(
    player_names: Annotated[
        list[str],
        typer.Argument(help="Player names, in turn order"),
    ],
    endpoint: EndpointOption = None,
    config_path: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Create a new game.

    Examples:
        python -m bowling.cli game create Alice Bob
        python -m bowling.cli game create Alice -e http://localhost:5000/api/game
    """
    game = _run(
        endpoint,
        config_path,
        verbose,
        lambda client: client.create_game(player_names),
    )
    print_resource(game)


@app.command("get")
def get(
    game_id: Annotated[str, typer.Argument(help="Game identifier")],
    endpoint: EndpointOption = None,
    config_path: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show the current state of a game."""
    game = _run(
        endpoint,
        config_path,
        verbose,
        lambda client: client.get_game(game_id),
    )
    print_resource(game)


@app.command("roll")
def roll(
    game_id: Annotated[str, typer.Argument(help="Game identifier")],
    player_id: Annotated[str, typer.Argument(help="Identifier of the rolling player")],
    pins: Annotated[int, typer.Argument(help="Number of pins knocked down")],
    endpoint: EndpointOption = None,
    config_path: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Submit a roll for a player.

    A player id made only of digits is sent as a JSON number.
    """
    result = _run(
        endpoint,
        config_path,
        verbose,
        lambda client: client.roll_ball(game_id, parse_id(player_id), pins),
    )
    if result is None:
        console.print("Roll accepted (no result body)")
        return
    print_resource(result)
