"""
Unit tests for the shared command line helpers.
"""

import subprocess
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.append(str(Path(__file__).parent.parent))

from src.config.settings import DEFAULT_CONFIG_PATH
from src.pipeline.cli import build_parser

PROJECT_ROOT = Path(__file__).parent.parent


class TestBuildParser:
    """Test cases for the shared argument parser."""

    def test_default_config_path(self):
        args = build_parser("test").parse_args([])
        assert args.config_path == DEFAULT_CONFIG_PATH

    def test_config_path_override(self):
        args = build_parser("test").parse_args(["--config-path", "other.json"])
        assert args.config_path == "other.json"

    def test_unknown_flag_rejected(self):
        with pytest.raises(SystemExit):
            build_parser("test").parse_args(["--verbose"])


class TestEntryPointIndependence:
    """The archival entry point stands apart from the validation stack."""

    def test_archive_entry_point_does_not_load_validation(self):
        code = (
            "import sys\n"
            "import src.pipeline.run_archive\n"
            "assert 'src.pipeline.run_validation' not in sys.modules\n"
            "assert 'pandas' not in sys.modules\n"
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr


if __name__ == "__main__":
    pytest.main([__file__])
