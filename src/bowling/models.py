"""HTTP API request/response models.

Request bodies are Pydantic models so that field aliases match the wire format
of the scoring service. Response payloads are left as plain decoded JSON; the
service owns their shape and callers validate them as needed.
"""

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, JsonValue, RootModel

# Decoded JSON returned by the scoring service, passed through unmodified.
GameResource: TypeAlias = JsonValue
RollResult: TypeAlias = JsonValue


# =============================================================================
# Create Game API
# =============================================================================


class GameCreationRequest(RootModel[list[str]]):
    """Request body for POST {endpoint}: a bare JSON array of player names."""

    model_config = ConfigDict(strict=True)

    root: list[str]


# =============================================================================
# Roll API
# =============================================================================


class RollRequest(BaseModel):
    """Request body for POST {endpoint}/{gameId}/roll."""

    model_config = ConfigDict(populate_by_name=True, strict=True)

    player_id: str | int = Field(alias="playerId")
    pins: int
