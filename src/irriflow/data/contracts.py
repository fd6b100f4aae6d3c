"""
Data contracts for irrigation trial observations.
Defines the input row schema and the column-presence checks the stages rely on.
"""
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd
from pydantic import BaseModel, Field

from irriflow.core.constants import (
    COL_DATE, COL_RUNOFF_TIME, OPTIONAL_COLUMNS, REQUIRED_COLUMNS,
)
from irriflow.core.exceptions import ErrorContext, MissingColumnError
from irriflow.core.types import PlotID, RepID


class ObservationRecord(BaseModel):
    """One bucket-fill/outflow measurement event for a plot, rep and date"""
    plot: PlotID = Field(description="Treatment identifier, e.g. CT, ST, MT")
    rep: RepID = Field(description="Replication number")
    date: date

    # Bucket fill times, seconds; either may be missing
    reading_1: Optional[float] = None
    reading_2: Optional[float] = None

    irr_time: Optional[float] = Field(None, description="Irrigation set time, hours")
    outflow_gal: Optional[float] = Field(None, description="Water leaving the field over the set, gallons")
    runoff_time: Optional[float] = Field(None, description="Runoff duration during the set, minutes")

    model_config = {"extra": "forbid"}


def check_required_columns(df: pd.DataFrame, component: Optional[str] = None) -> None:
    """Raise MissingColumnError if any required input column is absent"""
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise MissingColumnError(
            missing,
            ErrorContext(component=component, operation="check_required_columns",
                         details={"columns": list(df.columns)}),
        )


def has_runoff_time(df: pd.DataFrame) -> bool:
    """
    Whether the table carries the optional runoff_time column.

    This is a structural check on the table, not a per-row missing check:
    a runoff_time column full of blanks still counts as present.
    """
    return COL_RUNOFF_TIME in df.columns


def records_to_dataframe(records: Iterable[ObservationRecord]) -> pd.DataFrame:
    """
    Convert observation records to an input table.

    Required columns are always present. runoff_time is included only when at
    least one record sets it, mirroring a CSV that has or lacks the column.
    """
    rows: List[dict] = [record.model_dump(exclude_unset=True) for record in records]
    df = pd.DataFrame(rows)

    columns = list(REQUIRED_COLUMNS) + [c for c in OPTIONAL_COLUMNS if c in df.columns]
    df = df.reindex(columns=columns)

    if len(df):
        df[COL_DATE] = pd.to_datetime(df[COL_DATE])
    return df
