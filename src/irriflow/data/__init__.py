"""
irriflow data package.

Provides the observation contract and CSV input/output for trial tables.
"""

from irriflow.data.contracts import (
    ObservationRecord,
    check_required_columns,
    has_runoff_time,
    records_to_dataframe,
)
from irriflow.data.io import read_observations, write_results

__all__ = [
    "ObservationRecord",
    "check_required_columns",
    "has_runoff_time",
    "records_to_dataframe",
    "read_observations",
    "write_results",
]
