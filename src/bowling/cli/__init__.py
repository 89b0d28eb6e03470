"""Command line front end for the bowling scoring service.

Usage:
    python -m bowling.cli --help
    python -m bowling.cli game create Alice Bob
    python -m bowling.cli game roll g1 p1 10
"""

from bowling.cli.main import app

__all__ = ["app"]
