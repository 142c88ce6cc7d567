"""
Archival pass for ProviderDQ.

Moves every CSV file from the configured input folder to the archive
folder. Runs separately from validation.
"""

import logging
import sys
from typing import List, Optional

from src.archive.archiver import archive_input_files
from src.config.settings import ConfigError, ConfigNotFound, load_config
from src.pipeline.cli import build_parser, setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the archival pass."""
    args = build_parser("ProviderDQ input archival").parse_args(argv)
    setup_logging()

    try:
        config = load_config(args.config_path)
        moved = archive_input_files(config.input_folder, config.archive_folder)
    except ConfigNotFound as e:
        print(f"Config file not found: {args.config_path}")
        logger.error(str(e))
        sys.exit(1)
    except (ConfigError, OSError) as e:
        logger.error(f"Archival failed: {e}")
        sys.exit(1)

    print(f"Archived {len(moved)} file(s) to {config.archive_folder}")


if __name__ == "__main__":
    main()
