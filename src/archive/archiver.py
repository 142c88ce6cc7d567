"""
Input file archiver for ProviderDQ.

Moves every CSV file in the input folder into the archive folder. This is
independent of the validation pass: files are moved whatever their
validation outcome, and files matching neither feed pattern are moved too.
"""

import logging
import shutil
from pathlib import Path
from typing import List, Union

from src.ingestion.file_discovery import discover_csv_files

logger = logging.getLogger(__name__)


def archive_file(source: Path, archive_dir: Path) -> Path:
    """
    Move one file into the archive folder.

    An existing archived file with the same name is replaced.

    Returns:
        Destination path
    """
    destination = archive_dir / source.name
    if destination.exists():
        logger.debug(f"Overwriting existing archive file {destination}")
        destination.unlink()
    shutil.move(str(source), str(destination))
    return destination


def archive_input_files(input_dir: Union[str, Path],
                        archive_dir: Union[str, Path]) -> List[Path]:
    """
    Move all CSV files from the input folder to the archive folder.

    The first file that cannot be moved stops the batch; files moved
    before it stay in the archive.

    Args:
        input_dir: Folder holding delivered feed files
        archive_dir: Destination folder (created if missing)

    Returns:
        Destination paths in the order the files were moved
    """
    archive_path = Path(archive_dir)
    archive_path.mkdir(parents=True, exist_ok=True)

    moved = []
    for source in discover_csv_files(input_dir):
        try:
            destination = archive_file(source, archive_path)
        except OSError as e:
            logger.error(f"Failed to archive {source}: {e}")
            raise
        logger.info(f"Archived {source.name} to {archive_path}")
        moved.append(destination)

    if not moved:
        logger.info(f"No CSV files to archive in {input_dir}")
    return moved
