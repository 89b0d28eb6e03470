"""Config subcommands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml

from bowling.cli.utils.output import console, print_error, print_success
from bowling.config import ClientConfig

app = typer.Typer(no_args_is_help=True)


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed configuration"),
    ] = False,
) -> None:
    """Validate a client configuration file.

    Examples:
        python -m bowling.cli config validate bowling.yaml
        python -m bowling.cli config validate bowling.yaml --verbose
    """
    try:
        with open(config_path) as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)

    if raw_data is None:
        print_error("Configuration file is empty")
        raise typer.Exit(1)

    if not isinstance(raw_data, dict):
        print_error("Configuration must be a YAML mapping (dictionary)")
        raise typer.Exit(1)

    try:
        config = ClientConfig.from_dict(raw_data)
    except TypeError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        print_error(f"Invalid configuration value: {e}")
        raise typer.Exit(1)

    print_success(f"Configuration is valid: {config_path}")

    if verbose:
        console.print()
        console.print("[bold]Configuration Summary:[/bold]")
        console.print(f"  Endpoint: {config.endpoint}")
        console.print(f"  Log Level: {config.log_level}")


@app.command("generate")
def generate(
    output: Annotated[
        Path,
        typer.Argument(help="Output file path"),
    ],
    endpoint: Annotated[
        str,
        typer.Option("--endpoint", "-e", help="Scoring service endpoint"),
    ],
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", help="Logging level"),
    ] = "WARNING",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Generate a client configuration file.

    Examples:
        python -m bowling.cli config generate bowling.yaml -e http://localhost:5000/api/game
    """
    if output.exists() and not force:
        print_error(f"File already exists: {output}")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    try:
        config = ClientConfig(endpoint=endpoint, log_level=log_level)
    except ValueError as e:
        print_error(f"Invalid configuration value: {e}")
        raise typer.Exit(1)

    config.to_yaml(output)
    print_success(f"Configuration written to: {output}")
