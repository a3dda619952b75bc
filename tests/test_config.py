"""Tests for provider configuration."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from diskfs.config import ProviderConfig, default_config_path, load_config, save_config


class TestProviderConfig:
    """Tests for ProviderConfig model."""

    def test_defaults(self) -> None:
        """Test the safe-write defaults."""
        config = ProviderConfig()

        assert config.write_retry_attempts == 3
        assert config.write_retry_delay_ms == 100
        assert config.write_retry_delay == pytest.approx(0.1)
        assert config.temp_dir is None

    def test_resolve_temp_dir_default(self) -> None:
        """Test the OS temp directory is used when unset."""
        assert ProviderConfig().resolve_temp_dir() == Path(tempfile.gettempdir())

    def test_resolve_temp_dir_override(self, tmp_path: Path) -> None:
        """Test an explicit temp directory wins."""
        assert ProviderConfig(temp_dir=tmp_path).resolve_temp_dir() == tmp_path

    def test_accepts_aliases(self) -> None:
        """Test camelCase keys from config files."""
        config = ProviderConfig.model_validate({"writeRetryAttempts": 5, "writeRetryDelayMs": 20})

        assert config.write_retry_attempts == 5
        assert config.write_retry_delay_ms == 20

    @pytest.mark.parametrize(
        "data",
        [{"writeRetryAttempts": 0}, {"writeRetryDelayMs": -1}],
    )
    def test_rejects_invalid_values(self, data: dict) -> None:
        """Test out of range values are rejected."""
        with pytest.raises(ValidationError):
            ProviderConfig.model_validate(data)

    def test_from_file_missing(self, tmp_path: Path) -> None:
        """Test loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ProviderConfig.from_file(tmp_path / "missing.json")


class TestLoadConfig:
    """Tests for loading and saving config files."""

    def test_load_missing_returns_defaults(self, tmp_path: Path) -> None:
        """Test a missing file yields defaults."""
        assert load_config(tmp_path / "config.json") == ProviderConfig()

    def test_load_from_file(self, tmp_path: Path) -> None:
        """Test values are read from JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"writeRetryAttempts": 7, "tempDir": str(tmp_path)}))

        config = load_config(config_file)

        assert config.write_retry_attempts == 7
        assert config.temp_dir == tmp_path

    def test_save_writes_aliases(self, tmp_path: Path) -> None:
        """Test saved files use camelCase keys and omit unset paths."""
        config_file = tmp_path / "nested" / "config.json"

        save_config(ProviderConfig(write_retry_attempts=4), config_file)

        data = json.loads(config_file.read_text())
        assert data == {"writeRetryAttempts": 4, "writeRetryDelayMs": 100}
        assert load_config(config_file).write_retry_attempts == 4

    def test_default_path_under_home(self, temp_home: Path) -> None:
        """Test the default location is ~/.diskfs/config.json."""
        assert default_config_path() == temp_home / ".diskfs" / "config.json"
        assert load_config() == ProviderConfig()
