import numpy as np
import pandas as pd
import pytest
from pydantic import ValidationError

from irriflow.core.constants import REQUIRED_COLUMNS
from irriflow.core.exceptions import MissingColumnError
from irriflow.data.contracts import (
    ObservationRecord, check_required_columns, has_runoff_time, records_to_dataframe,
)


def test_records_without_runoff_time_have_no_runoff_column():
    records = [ObservationRecord(plot="CT", rep=1, date="2022-06-01", reading_1=60.0)]
    df = records_to_dataframe(records)

    assert list(df.columns) == list(REQUIRED_COLUMNS)
    assert not has_runoff_time(df)
    assert np.isnan(df.loc[0, "reading_2"])
    assert pd.api.types.is_datetime64_any_dtype(df["date"])


def test_any_runoff_time_adds_column():
    records = [
        ObservationRecord(plot="CT", rep=1, date="2022-06-01", runoff_time=45.0),
        ObservationRecord(plot="CT", rep=2, date="2022-06-01"),
    ]
    df = records_to_dataframe(records)

    assert has_runoff_time(df)
    assert df.loc[0, "runoff_time"] == 45.0
    assert np.isnan(df.loc[1, "runoff_time"])


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        ObservationRecord(plot="CT", rep=1, date="2022-06-01", flume_cfs=1.0)


def test_check_required_columns_lists_all_missing():
    df = pd.DataFrame({"plot": ["CT"], "rep": [1], "date": ["06/01/22"]})
    with pytest.raises(MissingColumnError) as exc_info:
        check_required_columns(df)
    assert exc_info.value.missing == ["reading_1", "reading_2", "irr_time", "outflow_gal"]
    assert "irr_time" in str(exc_info.value)
