"""Entry point for running the CLI as a module.

Usage:
    python -m bowling.cli --help
"""

from bowling.cli.main import app

if __name__ == "__main__":
    app()
