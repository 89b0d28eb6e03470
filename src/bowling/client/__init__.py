"""HTTP client module for the bowling scoring service.

Usage:
    from bowling.client import BowlingHTTPClient, HttpError

    async with BowlingHTTPClient("http://localhost:5000/api/game") as client:
        game = await client.create_game(["Alice", "Bob"])
"""

from bowling.client.http_client import (
    BowlingConnectionError,
    BowlingHTTPClient,
    BowlingHTTPClientError,
    HttpError,
)

__all__ = [
    "BowlingHTTPClient",
    "BowlingHTTPClientError",
    "HttpError",
    "BowlingConnectionError",
]
