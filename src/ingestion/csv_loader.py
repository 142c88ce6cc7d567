"""
CSV feed loader for ProviderDQ.

Rows are kept as plain text: every column is read as a string and empty
cells stay empty strings, so typed coercion is left to the check that
needs it.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

logger = logging.getLogger(__name__)


def load_feed(file_path: Union[str, Path]) -> pd.DataFrame:
    """
    Load one feed file.

    A file with no header at all loads as an empty DataFrame, so the
    schema check reports every required column as missing.

    Args:
        file_path: Path to CSV file with a header row

    Returns:
        DataFrame of string values, one row per CSV line
    """
    try:
        df = pd.read_csv(
            file_path,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError:
        logger.warning(f"CSV {Path(file_path).name} has no header row")
        return pd.DataFrame()
    df.columns = [str(col).strip() for col in df.columns]
    logger.info(f"Loaded CSV {Path(file_path).name} with {len(df)} rows")
    return df
