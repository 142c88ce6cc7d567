"""
Validation pass for ProviderDQ.

Discovers provider and credential feed files, checks each one, and writes
findings to a timestamped data quality log and the console.
"""

import logging
import sys
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from src.config.settings import (
    ConfigError,
    ConfigNotFound,
    DataConfig,
    load_config,
)
from src.ingestion.csv_loader import load_feed
from src.ingestion.file_discovery import discover_files
from src.pipeline.cli import build_parser, setup_logging
from src.reporting.quality_log import QualityLog
from src.validation.feed_validator import (
    CredentialFeedValidator,
    FeedValidator,
    MalformedDateError,
    ProviderFeedValidator,
)

logger = logging.getLogger(__name__)


class DataQualityValidator:
    """
    Runs the validation pass over both feeds.

    Provider files are checked before credential files; within a feed,
    files are checked in discovery order.
    """

    def __init__(self, config: DataConfig, started_at: Optional[datetime] = None,
                 as_of: Optional[date] = None):
        """
        Args:
            config: Run configuration
            started_at: Run start time, used in the log file name
            as_of: Evaluation date for expiry checks (defaults to today)
        """
        self.config = config
        self.started_at = started_at or datetime.now()
        self.as_of = as_of
        self.files_validated = 0

    def _validate_feed(self, qlog: QualityLog, label: str, pattern: str,
                       validator: FeedValidator) -> List[str]:
        """Check every file of one feed type."""
        files = discover_files(self.config.input_folder, pattern)
        if not files:
            qlog.write(f"No {label} files found matching pattern '{pattern}' "
                       f"in {self.config.input_folder}")
            return []

        findings = []
        for file_path in files:
            qlog.write(f"Validating {label} file: {file_path.name}")
            df = load_feed(file_path)
            file_findings = validator.validate(df, file_path.name)
            for finding in file_findings:
                qlog.write(finding)
            findings.extend(file_findings)
            self.files_validated += 1
        return findings

    def run(self) -> Dict[str, Any]:
        """
        Run the validation pass.

        Returns:
            Report with the log file path, file count and finding lines

        Raises:
            MalformedDateError: If an Active credential has a bad ExpiryDate
        """
        logger.info(f"Starting data quality validation of {self.config.input_folder}")
        self.files_validated = 0

        with QualityLog(self.config.log_folder, self.started_at) as qlog:
            findings = self._validate_feed(
                qlog, "provider", self.config.provider_file_pattern,
                ProviderFeedValidator(),
            )
            findings += self._validate_feed(
                qlog, "credential", self.config.credential_file_pattern,
                CredentialFeedValidator(self.as_of),
            )
            qlog.write(f"Data quality validation completed: {len(findings)} finding(s) "
                       f"across {self.files_validated} file(s)")

        return {
            "log_file": str(qlog.path),
            "files_validated": self.files_validated,
            "findings": findings,
            "started_at": self.started_at,
            "finished_at": datetime.now(),
        }


def main(argv: Optional[List[str]] = None):
    """Main entry point for the validation pass."""
    started_at = datetime.now()
    args = build_parser("ProviderDQ feed validation").parse_args(argv)
    setup_logging()

    try:
        config = load_config(args.config_path)
        report = DataQualityValidator(config, started_at=started_at).run()
    except ConfigNotFound as e:
        print(f"Config file not found: {args.config_path}")
        logger.error(str(e))
        sys.exit(1)
    except (ConfigError, MalformedDateError) as e:
        logger.error(f"Validation failed: {e}")
        sys.exit(1)

    print("\n" + "=" * 50)
    print("DATA QUALITY VALIDATION SUMMARY")
    print("=" * 50)
    print(f"Files Validated: {report['files_validated']}")
    print(f"Findings: {len(report['findings'])}")
    print(f"Log File: {report['log_file']}")
    print("=" * 50)


if __name__ == "__main__":
    main()
