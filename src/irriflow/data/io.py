"""Reading and writing trial tables.

The input is the comma-separated template used in the field: one row per
plot/rep/date with the date written as month/day/two-digit-year.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from irriflow.core.config import IOConfig
from irriflow.core.constants import COL_DATE
from irriflow.core.exceptions import (
    DataSourceError, DataValidationError, ErrorContext, MissingColumnError,
)

logger = logging.getLogger("irriflow.data.io")


def parse_dates(df: pd.DataFrame, date_format: str) -> pd.DataFrame:
    """Return a copy of df with the date column parsed to datetime64."""
    if COL_DATE not in df.columns:
        raise MissingColumnError([COL_DATE], ErrorContext(component="io", operation="parse_dates"))

    result = df.copy()
    try:
        result[COL_DATE] = pd.to_datetime(result[COL_DATE], format=date_format)
    except (ValueError, TypeError) as e:
        raise DataValidationError(
            f"Could not parse '{COL_DATE}' with format {date_format!r}: {e}",
            ErrorContext(component="io", operation="parse_dates"),
        ) from e
    return result


def read_observations(path: Union[str, Path], config: Optional[IOConfig] = None) -> pd.DataFrame:
    """
    Read an observation CSV and parse its date column.

    Args:
        path: CSV file with the trial template columns.
        config: I/O settings; defaults to IOConfig().

    Returns:
        DataFrame with one row per observation.
    """
    config = config or IOConfig()
    path = Path(path)
    if not path.exists():
        raise DataSourceError(
            f"Input file not found: {path}",
            ErrorContext(component="io", operation="read_observations"),
        )

    try:
        df = pd.read_csv(path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataSourceError(
            f"Could not read {path}: {e}",
            ErrorContext(component="io", operation="read_observations"),
        ) from e

    df = parse_dates(df, config.date_format)
    logger.info("Read %d observations with %d columns from %s", len(df), len(df.columns), path)
    return df


def write_results(df: pd.DataFrame, path: Union[str, Path], config: Optional[IOConfig] = None) -> Path:
    """Write the calculated table to CSV, creating parent directories."""
    config = config or IOConfig()
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df.to_csv(path, index=False, float_format=config.float_format)
    logger.info("Wrote %d rows to %s", len(df), path)
    return path
