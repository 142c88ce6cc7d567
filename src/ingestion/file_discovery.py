"""
Local file discovery for ProviderDQ.

Finds feed files in an input folder by filename glob pattern.
"""

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

CSV_PATTERN = "*.csv"


def discover_files(directory: Union[str, Path], pattern: str) -> List[Path]:
    """
    List files in a directory whose names match a glob pattern.

    A missing directory or an empty pattern yields an empty list rather
    than an error.

    Args:
        directory: Folder to search (not recursive)
        pattern: Filename glob, e.g. 'providers_*.csv'

    Returns:
        Matching file paths sorted by name
    """
    folder = Path(directory)
    if not pattern:
        logger.debug(f"Empty pattern given for {folder}, nothing to discover")
        return []
    if not folder.is_dir():
        logger.debug(f"Directory {folder} does not exist")
        return []

    files = sorted(
        (path for path in folder.glob(pattern) if path.is_file()),
        key=lambda path: path.name,
    )
    logger.info(f"Found {len(files)} files matching '{pattern}' in {folder}")
    return files


def discover_csv_files(directory: Union[str, Path]) -> List[Path]:
    """Every CSV file in a directory, regardless of feed type."""
    return discover_files(directory, CSV_PATTERN)
