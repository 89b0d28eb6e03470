"""CLI utility modules."""

from bowling.cli.utils.output import (
    console,
    print_error,
    print_resource,
    print_success,
)

__all__ = [
    "console",
    "print_error",
    "print_resource",
    "print_success",
]
