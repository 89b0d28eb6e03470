"""Configuration for the bowling scoring service client.

The endpoint is never defaulted: it must come from a config file, a command
line option or the environment.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

ENDPOINT_ENV_VAR = "BOWLING_API_URL"
LOG_LEVEL_ENV_VAR = "BOWLING_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ClientConfig:
    """Configuration for BowlingHTTPClient and the command line front end.

    Attributes:
        endpoint: Base URL of the game collection on the scoring service
        log_level: Logging level name used by the command line front end

    Example:
        config = ClientConfig(endpoint="http://localhost:5000/api/game")
        config.to_yaml("bowling.yaml")
    """

    endpoint: str
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.endpoint, str):
            raise ValueError(f"endpoint must be a string, got {self.endpoint!r}")
        if not isinstance(self.log_level, str):
            raise ValueError(f"log_level must be a string, got {self.log_level!r}")
        parsed = urlparse(self.endpoint)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"endpoint must be an http(s) URL, got {self.endpoint!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @property
    def logging_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.log_level)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to the output YAML file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Create configuration from a dictionary.

        Raises:
            TypeError: If required keys are missing or unknown keys are present.
            ValueError: If a value is invalid.
        """
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            ClientConfig instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            ValueError: If the file does not contain a mapping.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a YAML mapping: {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Load configuration from environment variables.

        Reads BOWLING_API_URL (required) and BOWLING_LOG_LEVEL (optional).

        Raises:
            ValueError: If BOWLING_API_URL is not set.
        """
        env = os.environ if environ is None else environ
        endpoint = env.get(ENDPOINT_ENV_VAR)
        if not endpoint:
            raise ValueError(f"{ENDPOINT_ENV_VAR} is not set")
        log_level = env.get(LOG_LEVEL_ENV_VAR)
        if log_level:
            return cls(endpoint=endpoint, log_level=log_level)
        return cls(endpoint=endpoint)
