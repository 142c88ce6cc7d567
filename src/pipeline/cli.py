"""
Command line helpers shared by the validation and archival entry points.
"""

import argparse
import logging

from src.config.settings import DEFAULT_CONFIG_PATH


def build_parser(description: str) -> argparse.ArgumentParser:
    """Argument parser accepting an optional configuration path."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config-path", default=DEFAULT_CONFIG_PATH,
                        help="Configuration file path")
    return parser


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
