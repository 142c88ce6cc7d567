"""
Feed validators for ProviderDQ.

Each check inspects one loaded feed file and returns finding lines. Checks
never modify the DataFrame they are given and never share state between
files: the column set is taken from each file's own header.
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional

import pandas as pd

from src.validation.rules import (
    ACTIVE_STATUS,
    CREDENTIAL_REQUIRED_COLUMNS,
    EXPIRED_ACTIVE_MESSAGE,
    EXPIRY_COLUMN,
    EXPIRY_DATE_FORMAT,
    KEY_COLUMN,
    MISSING_COLUMN_MESSAGE,
    MISSING_KEY_MESSAGE,
    PROVIDER_REQUIRED_COLUMNS,
    STATUS_COLUMN,
)

logger = logging.getLogger(__name__)


class MalformedDateError(ValueError):
    """Raised when an Active credential has an unparseable ExpiryDate."""

    def __init__(self, file_name: str, row_number: int, value: Optional[str]):
        self.file_name = file_name
        self.row_number = row_number
        self.value = value
        super().__init__(
            f"Invalid {EXPIRY_COLUMN} {value!r} on row {row_number} of {file_name}"
        )


def find_missing_columns(df: pd.DataFrame, required_columns: Iterable[str]) -> List[str]:
    """Required columns absent from the file header, in required order."""
    present = set(df.columns)
    return [col for col in required_columns if col not in present]


def count_missing_keys(df: pd.DataFrame, key_column: str = KEY_COLUMN) -> int:
    """
    Count rows with an empty key value.

    When the key column is absent from the header every row counts as
    missing its key.
    """
    if key_column not in df.columns:
        return len(df)
    keys = df[key_column].fillna("").astype(str).str.strip()
    return int((keys == "").sum())


def parse_expiry_date(value: Optional[str], file_name: str, row_number: int) -> date:
    """
    Coerce an ExpiryDate string to a calendar date.

    Args:
        value: Raw cell value
        file_name: Source file name, for the error message
        row_number: 1-based data row number, for the error message

    Returns:
        Parsed date

    Raises:
        MalformedDateError: If the value is empty or not a YYYY-MM-DD date
    """
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise MalformedDateError(file_name, row_number, value)
    try:
        return datetime.strptime(text, EXPIRY_DATE_FORMAT).date()
    except ValueError as e:
        raise MalformedDateError(file_name, row_number, value) from e


def count_expired_active(df: pd.DataFrame, file_name: str,
                         as_of: Optional[date] = None) -> int:
    """
    Count credentials marked Active whose expiry date has already passed.

    Only Active rows have their ExpiryDate parsed.

    Args:
        df: Credential feed
        file_name: Source file name, for error messages
        as_of: Evaluation date (defaults to today)

    Returns:
        Number of Active rows with ExpiryDate strictly before as_of
    """
    if STATUS_COLUMN not in df.columns:
        return 0

    as_of = as_of or date.today()
    has_expiry = EXPIRY_COLUMN in df.columns

    count = 0
    active = 0
    for position, (_, row) in enumerate(df.iterrows(), start=1):
        if row[STATUS_COLUMN] != ACTIVE_STATUS:
            continue
        active += 1
        raw_value = row[EXPIRY_COLUMN] if has_expiry else None
        if parse_expiry_date(raw_value, file_name, position) < as_of:
            count += 1

    logger.debug(f"{file_name}: {count} of {active} Active credentials expired as of {as_of}")
    return count


class FeedValidator:
    """
    Base validator for one feed type.

    Subclasses set the feed label and its required columns, and may add
    checks in ``extra_checks``.
    """

    feed = ""
    required_columns: List[str] = []

    def check_required_columns(self, df: pd.DataFrame, file_name: str) -> List[str]:
        """One finding per required column missing from the header."""
        return [
            MISSING_COLUMN_MESSAGE.format(column=col, feed=self.feed, file_name=file_name)
            for col in find_missing_columns(df, self.required_columns)
        ]

    def check_missing_keys(self, df: pd.DataFrame, file_name: str) -> List[str]:
        """A single finding with the count of rows lacking a ProviderID."""
        count = count_missing_keys(df)
        if count > 0:
            return [MISSING_KEY_MESSAGE.format(count=count, file_name=file_name)]
        return []

    def extra_checks(self, df: pd.DataFrame, file_name: str) -> List[str]:
        return []

    def validate(self, df: pd.DataFrame, file_name: str) -> List[str]:
        """
        Run every check for this feed type.

        Args:
            df: Loaded feed file
            file_name: Name used in finding lines

        Returns:
            Finding lines in check order
        """
        findings = []
        findings.extend(self.check_required_columns(df, file_name))
        findings.extend(self.check_missing_keys(df, file_name))
        findings.extend(self.extra_checks(df, file_name))
        logger.info(f"Validated {self.feed} file {file_name}: {len(findings)} findings")
        return findings


class ProviderFeedValidator(FeedValidator):
    """Schema and missing-key checks for provider roster files."""

    feed = "provider"
    required_columns = PROVIDER_REQUIRED_COLUMNS


class CredentialFeedValidator(FeedValidator):
    """
    Checks for credential roster files.

    Adds the expired-but-active rule on top of the schema and
    missing-key checks. Whether a credential's ProviderID exists in a
    provider file is not checked.
    """

    feed = "credential"
    required_columns = CREDENTIAL_REQUIRED_COLUMNS

    def __init__(self, as_of: Optional[date] = None):
        self.as_of = as_of

    def check_expired_active(self, df: pd.DataFrame, file_name: str) -> List[str]:
        count = count_expired_active(df, file_name, self.as_of)
        if count > 0:
            return [EXPIRED_ACTIVE_MESSAGE.format(count=count, file_name=file_name)]
        return []

    def extra_checks(self, df: pd.DataFrame, file_name: str) -> List[str]:
        return self.check_expired_active(df, file_name)
