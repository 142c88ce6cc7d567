"""
Unit tests for configuration loading.
"""

import json
import shutil
import sys
import tempfile
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

# Add src to path
sys.path.append(str(Path(__file__).parent.parent))

from src.config.settings import (
    ConfigError,
    ConfigNotFound,
    DataConfig,
    load_config,
)


class TestLoadConfig:
    """Test cases for load_config."""

    def setup_method(self):
        """Setup test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_data = {
            "InputFolder": "data/input",
            "ArchiveFolder": "data/archive",
            "LogFolder": "logs",
            "ProviderFilePattern": "providers_*.csv",
            "CredentialFilePattern": "credentials_*.csv",
        }

    def write_config(self, name, content):
        path = Path(self.temp_dir) / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_load_json_config(self):
        """Test all five settings are read from JSON."""
        path = self.write_config("data-config.json", json.dumps(self.config_data))
        config = load_config(path)

        assert config.input_folder == "data/input"
        assert config.archive_folder == "data/archive"
        assert config.log_folder == "logs"
        assert config.provider_file_pattern == "providers_*.csv"
        assert config.credential_file_pattern == "credentials_*.csv"

    def test_load_yaml_config(self):
        """Test YAML configuration files are accepted."""
        content = "\n".join(f"{key}: '{value}'" for key, value in self.config_data.items())
        path = self.write_config("data-config.yaml", content)
        config = load_config(path)

        assert config.provider_file_pattern == "providers_*.csv"
        assert config.log_folder == "logs"

    def test_missing_file_raises(self):
        """Test a missing configuration file raises ConfigNotFound."""
        with pytest.raises(ConfigNotFound):
            load_config(Path(self.temp_dir) / "absent.json")

    def test_config_not_found_is_file_not_found(self):
        assert issubclass(ConfigNotFound, FileNotFoundError)

    def test_missing_key_defaults_to_empty(self):
        """Test a missing key becomes an empty string instead of an error."""
        del self.config_data["CredentialFilePattern"]
        path = self.write_config("data-config.json", json.dumps(self.config_data))
        config = load_config(path)

        assert config.credential_file_pattern == ""
        assert config.provider_file_pattern == "providers_*.csv"

    def test_non_mapping_document_raises(self):
        path = self.write_config("data-config.json", json.dumps(["a", "b"]))
        with pytest.raises(ConfigError):
            load_config(path)

    def test_malformed_json_raises(self):
        path = self.write_config("data-config.json", "{not json")
        with pytest.raises(json.JSONDecodeError):
            load_config(path)

    def test_config_is_immutable(self):
        config = DataConfig.from_dict(self.config_data)
        with pytest.raises(FrozenInstanceError):
            config.input_folder = "elsewhere"

    def test_shipped_sample_config(self):
        """Test the sample configuration in the repository loads."""
        sample = Path(__file__).parent.parent / "config" / "data-config.json"
        config = load_config(sample)
        assert config.input_folder == "data/input"

    def teardown_method(self):
        """Cleanup test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)


if __name__ == "__main__":
    pytest.main([__file__])
