"""Provider configuration."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Default configuration location
CONFIG_DIR_NAME = ".diskfs"
CONFIG_FILE_NAME = "config.json"

# Windows safe-write retry defaults
DEFAULT_WRITE_RETRY_ATTEMPTS = 3
DEFAULT_WRITE_RETRY_DELAY_MS = 100


class ProviderConfig(BaseModel):
    """Tunables for the disk file system provider."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    write_retry_attempts: int = Field(
        default=DEFAULT_WRITE_RETRY_ATTEMPTS, ge=1, alias="writeRetryAttempts"
    )
    write_retry_delay_ms: int = Field(
        default=DEFAULT_WRITE_RETRY_DELAY_MS, ge=0, alias="writeRetryDelayMs"
    )
    temp_dir: Path | None = Field(default=None, alias="tempDir")

    @property
    def write_retry_delay(self) -> float:
        """Delay between write attempts in seconds."""
        return self.write_retry_delay_ms / 1000

    def resolve_temp_dir(self) -> Path:
        """Directory used to stage recursive deletes."""
        return self.temp_dir or Path(tempfile.gettempdir())

    @classmethod
    def from_file(cls, path: Path) -> ProviderConfig:
        """Load configuration from a JSON file.

        Args:
            path: Path to the config file.

        Returns:
            Parsed ProviderConfig.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If JSON or values are invalid.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = json.loads(path.read_text())
        return cls.model_validate(data)


def default_config_path() -> Path:
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(path: Path | None = None) -> ProviderConfig:
    """Load configuration, falling back to defaults.

    Args:
        path: Config file. Defaults to ~/.diskfs/config.json.

    Returns:
        Loaded config, or defaults if the file doesn't exist.
    """
    config_path = path or default_config_path()
    if not config_path.exists():
        return ProviderConfig()
    return ProviderConfig.from_file(config_path)


def save_config(config: ProviderConfig, path: Path | None = None) -> Path:
    """Save configuration as JSON.

    Args:
        config: Configuration to save.
        path: Target file. Defaults to ~/.diskfs/config.json.

    Returns:
        Path written.
    """
    config_path = path or default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(by_alias=True, exclude_none=True, mode="json")
    config_path.write_text(json.dumps(data, indent=2))
    return config_path
