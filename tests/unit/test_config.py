"""Unit tests for ClientConfig."""

import logging
import tempfile
from pathlib import Path

import pytest

from bowling.config import ClientConfig


class TestClientConfigValidation:
    """Tests for configuration validation."""

    def test_defaults(self) -> None:
        """Test the log level default and that the endpoint is kept verbatim."""
        config = ClientConfig(endpoint="http://localhost:5000/api/game")
        assert config.endpoint == "http://localhost:5000/api/game"
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    def test_endpoint_required(self) -> None:
        """Test there is no default endpoint."""
        with pytest.raises(TypeError):
            ClientConfig()  # type: ignore[call-arg]

    @pytest.mark.parametrize(
        "endpoint", ["", "localhost:5000", "ftp://example.com/game", "http://"]
    )
    def test_invalid_endpoint(self, endpoint: str) -> None:
        """Test non-http endpoints are rejected."""
        with pytest.raises(ValueError, match="endpoint"):
            ClientConfig(endpoint=endpoint)

    def test_log_level_normalized(self) -> None:
        """Test log level names are case-insensitive."""
        config = ClientConfig(endpoint="https://bowling.example.com", log_level="debug")
        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG

    def test_invalid_log_level(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError, match="log_level"):
            ClientConfig(endpoint="http://localhost", log_level="LOUD")


class TestClientConfigSerialization:
    """Tests for dict and YAML round trips."""

    def test_from_dict_unknown_key(self) -> None:
        """Test unknown keys raise TypeError."""
        with pytest.raises(TypeError):
            ClientConfig.from_dict({"endpoint": "http://localhost", "retries": 3})

    def test_yaml_round_trip(self) -> None:
        """Test saving and loading a YAML file."""
        config = ClientConfig(endpoint="http://localhost:5000/api/game", log_level="INFO")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "bowling.yaml"
            config.to_yaml(path)
            assert "http://localhost:5000/api/game" in path.read_text()
            assert ClientConfig.from_yaml(path) == config

    def test_from_yaml_requires_mapping(self) -> None:
        """Test a YAML list is rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bowling.yaml"
            path.write_text("- http://localhost\n")
            with pytest.raises(ValueError, match="mapping"):
                ClientConfig.from_yaml(path)


class TestClientConfigFromEnv:
    """Tests for environment loading."""

    def test_from_env(self) -> None:
        """Test endpoint and log level are read from the environment."""
        config = ClientConfig.from_env(
            {"BOWLING_API_URL": "http://svc/api/game", "BOWLING_LOG_LEVEL": "error"}
        )
        assert config.endpoint == "http://svc/api/game"
        assert config.log_level == "ERROR"

    def test_from_env_default_log_level(self) -> None:
        """Test the log level falls back to its default."""
        config = ClientConfig.from_env({"BOWLING_API_URL": "http://svc/api/game"})
        assert config.log_level == "WARNING"

    def test_from_env_missing_endpoint(self) -> None:
        """Test a missing endpoint is an error."""
        with pytest.raises(ValueError, match="BOWLING_API_URL"):
            ClientConfig.from_env({})

    def test_from_env_uses_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test os.environ is read when no mapping is given."""
        monkeypatch.setenv("BOWLING_API_URL", "http://env-host/api/game")
        monkeypatch.delenv("BOWLING_LOG_LEVEL", raising=False)
        assert ClientConfig.from_env().endpoint == "http://env-host/api/game"


class TestClientConfigTypes:
    """Tests for values of the wrong type, as loaded from YAML."""

    def test_non_string_endpoint(self) -> None:
        """Test a numeric endpoint raises ValueError."""
        with pytest.raises(ValueError, match="endpoint must be a string"):
            ClientConfig.from_dict({"endpoint": 123})

    def test_non_string_log_level(self) -> None:
        """Test a numeric log level raises ValueError."""
        with pytest.raises(ValueError, match="log_level must be a string"):
            ClientConfig.from_dict({"endpoint": "http://localhost", "log_level": 10})

    def test_non_string_endpoint_from_yaml(self) -> None:
        """Test a YAML file with a numeric endpoint raises ValueError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bowling.yaml"
            path.write_text("endpoint: 123\n")
            with pytest.raises(ValueError, match="endpoint"):
                ClientConfig.from_yaml(path)
