"""Rich console output formatting utilities."""

import json

from rich.console import Console

from bowling.models import GameResource

console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_resource(resource: GameResource) -> None:
    """Print a decoded service payload as indented JSON."""
    console.print_json(json.dumps(resource))
