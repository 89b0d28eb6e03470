"""Async HTTP client wrapper for the bowling scoring service REST API.

This module provides a thin interface over the three scoring service
operations: creating a game, fetching a game, and submitting a roll. All
scoring rules live in the service; the client only builds requests, decodes
JSON responses, and translates non-success statuses into HttpError.
"""

from __future__ import annotations

import logging
from typing import Any

from httpx import AsyncClient, HTTPError, Response
from pydantic import BaseModel, ValidationError

from bowling.models import GameCreationRequest, GameResource, RollRequest, RollResult

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


# =============================================================================
# Custom Exceptions
# =============================================================================


class BowlingHTTPClientError(Exception):
    """Base exception for HTTP client errors."""

    pass


class HttpError(BowlingHTTPClientError):
    """Raised when the scoring service responds with a non-2xx status.

    The message is the raw response body text. Error payloads are not parsed.
    """

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message

    def __repr__(self) -> str:
        return f"HttpError(status={self.status!r}, message={self.message!r})"


class BowlingConnectionError(BowlingHTTPClientError):
    """Raised when the client is not connected or the transport fails."""

    pass


# =============================================================================
# HTTP Client
# =============================================================================


class BowlingHTTPClient:
    """Async HTTP client for the bowling scoring service.

    Each operation is a single round trip. There is no retry, caching or
    timeout; concurrent calls are independent of each other.

    Example:
        async with BowlingHTTPClient("http://localhost:5000/api/game") as client:
            game = await client.create_game(["Alice", "Bob"])
            await client.roll_ball(game["id"], game["players"][0]["id"], 7)
    """

    def __init__(self, base_url: str):
        """Initialize the HTTP client.

        Args:
            base_url: Endpoint of the game collection, e.g.
                http://localhost:5000/api/game. Trailing slashes are stripped.
        """
        self.base_url = base_url.rstrip("/")
        self._client: AsyncClient | None = None

    async def __aenter__(self) -> BowlingHTTPClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create the underlying httpx.AsyncClient if it does not exist yet."""
        if self._client is None:
            self._client = AsyncClient(timeout=None, follow_redirects=True)
            logger.debug("HTTP client connected to %s", self.base_url)

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")

    # =========================================================================
    # Public API Methods
    # =========================================================================

    async def create_game(self, player_names: list[str]) -> GameResource:
        """Create a new game for the given players.

        Args:
            player_names: Display names, in turn order. Sent as given.

        Returns:
            The decoded game resource.

        Raises:
            HttpError: If the service responds with a non-2xx status.
            BowlingConnectionError: If the request cannot be sent.
            BowlingHTTPClientError: If the request arguments have the wrong types.
        """
        try:
            request = GameCreationRequest(player_names)
        except ValidationError as e:
            raise BowlingHTTPClientError(f"Request validation error: {e}") from e
        response = await self._post(self.base_url, request)
        return self._decode(response)

    async def get_game(self, game_id: str | int) -> GameResource:
        """Fetch a game by id.

        Args:
            game_id: Game identifier, interpolated into the path as given.

        Returns:
            The decoded game resource.

        Raises:
            HttpError: If the service responds with a non-2xx status.
            BowlingConnectionError: If the request cannot be sent.
        """
        response = await self._request("GET", f"{self.base_url}/{game_id}")
        return self._decode(response)

    async def roll_ball(
        self,
        game_id: str | int,
        player_id: str | int,
        pins: int,
    ) -> RollResult | None:
        """Submit a roll for a player.

        Pins are not range checked here; the service validates the roll.

        Args:
            game_id: Game identifier, interpolated into the path as given.
            player_id: Identifier of the rolling player.
            pins: Number of pins knocked down.

        Returns:
            The decoded roll result, or None when the successful response
            body is empty or not JSON.

        Raises:
            HttpError: If the service responds with a non-2xx status.
            BowlingConnectionError: If the request cannot be sent.
            BowlingHTTPClientError: If the request arguments have the wrong types.
        """
        try:
            request = RollRequest(player_id=player_id, pins=pins)
        except ValidationError as e:
            raise BowlingHTTPClientError(f"Request validation error: {e}") from e
        response = await self._post(f"{self.base_url}/{game_id}/roll", request)
        try:
            return response.json()
        except ValueError:
            logger.debug(
                "Roll for game %s returned no JSON body (status %d)",
                game_id,
                response.status_code,
            )
            return None

    # =========================================================================
    # Internal HTTP Methods
    # =========================================================================

    async def _post(self, url: str, request_data: BaseModel) -> Response:
        """Perform a POST request with a JSON body."""
        return await self._request(
            "POST",
            url,
            json=request_data.model_dump(by_alias=True),
            headers=JSON_HEADERS,
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        """Execute an HTTP request and check its status.

        Args:
            method: HTTP method (GET, POST).
            url: Absolute request URL.
            **kwargs: Additional arguments passed to httpx request.

        Returns:
            The response, whose status is known to be 2xx.

        Raises:
            HttpError: If the status is outside 200-299.
            BowlingConnectionError: If not connected or the transport fails.
        """
        if self._client is None:
            raise BowlingConnectionError("Client not connected. Call connect() first.")

        logger.debug("Request %s %s", method, url)
        try:
            response = await self._client.request(method, url, **kwargs)
        except HTTPError as e:
            raise BowlingConnectionError(f"HTTP error: {e}") from e

        if not 200 <= response.status_code < 300:
            error_text = response.text
            logger.warning("API error %d: %s", response.status_code, error_text)
            raise HttpError(response.status_code, error_text)

        return response

    @staticmethod
    def _decode(response: Response) -> GameResource:
        """Decode a successful response body as JSON."""
        try:
            return response.json()
        except ValueError as e:
            raise BowlingHTTPClientError(f"Response decode error: {e}") from e
