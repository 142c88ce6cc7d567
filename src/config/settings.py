"""
Run configuration for ProviderDQ.

Reads the small JSON (or YAML) document that names the input, archive and
log folders plus the provider/credential filename patterns.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/data-config.json"

# Document key -> DataConfig field
CONFIG_KEYS = {
    "InputFolder": "input_folder",
    "ArchiveFolder": "archive_folder",
    "LogFolder": "log_folder",
    "ProviderFilePattern": "provider_file_pattern",
    "CredentialFilePattern": "credential_file_pattern",
}


class ConfigNotFound(FileNotFoundError):
    """Raised when the configuration file does not exist."""


class ConfigError(ValueError):
    """Raised when the configuration document is not a key/value mapping."""


@dataclass(frozen=True)
class DataConfig:
    """Folders and filename patterns for one invocation."""

    input_folder: str
    archive_folder: str
    log_folder: str
    provider_file_pattern: str
    credential_file_pattern: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "DataConfig":
        """
        Build configuration from a parsed document.

        Missing keys become empty strings, so a missing pattern simply
        matches nothing later on.

        Args:
            raw: Parsed configuration mapping

        Returns:
            DataConfig instance
        """
        values = {}
        for key, field_name in CONFIG_KEYS.items():
            value = raw.get(key)
            if value is None:
                logger.warning(f"Configuration key '{key}' is missing, defaulting to empty")
                value = ""
            values[field_name] = str(value)
        return cls(**values)


def load_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> DataConfig:
    """
    Load run configuration from a JSON or YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        DataConfig with the five settings

    Raises:
        ConfigNotFound: If the file does not exist
        ConfigError: If the document is not a mapping
    """
    config_file = Path(config_path)
    if not config_file.is_file():
        raise ConfigNotFound(f"Configuration file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        if config_file.suffix.lower() in (".yaml", ".yml"):
            raw = yaml.safe_load(f)
        else:
            raw = json.load(f)

    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration in {config_path} must be a mapping, "
                          f"got {type(raw).__name__}")

    config = DataConfig.from_dict(raw)
    logger.info(f"Loaded configuration from {config_path}")
    return config
