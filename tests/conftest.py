"""Shared fixtures for bowling client tests.

This module provides:
- The endpoint used by unit tests
- A connected BowlingHTTPClient fixture
- A helper for building httpx responses returned by a mocked transport call
"""

from collections.abc import AsyncIterator
from typing import Any

import pytest_asyncio
from httpx import Response

from bowling.client import BowlingHTTPClient

ENDPOINT = "http://localhost:5000/api/game"


def make_response(status_code: int, body: Any = None, *, text: str | None = None) -> Response:
    """Build an httpx Response with either a JSON body or raw text."""
    if text is not None:
        return Response(status_code, text=text)
    if body is None:
        return Response(status_code)
    return Response(status_code, json=body)


@pytest_asyncio.fixture
async def client() -> AsyncIterator[BowlingHTTPClient]:
    """Connected client, closed after the test."""
    http_client = BowlingHTTPClient(ENDPOINT)
    await http_client.connect()
    yield http_client
    await http_client.close()
