import numpy as np
import pandas as pd
import pytest

from irriflow.core.config import FieldGeometryConfig, IrriflowConfig, set_config


@pytest.fixture(autouse=True)
def reset_global_config():
    """Each test starts without a cached global configuration"""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def geometry():
    """Geometry of the reference trial (7.2 L bucket, 30 in rows, 1050 ft run)"""
    return FieldGeometryConfig(
        bucket_size_l=7.2, row_spacing_in=30, field_length_ft=1050, num_rows_diverted=2
    )


@pytest.fixture
def config(geometry):
    return IrriflowConfig(geometry=geometry)


@pytest.fixture
def observations():
    """Small trial table without a runoff_time column"""
    return pd.DataFrame(
        {
            "plot": ["CT", "ST", "MT", "CT"],
            "rep": [1, 1, 1, 2],
            "date": pd.to_datetime(["2022-06-01"] * 4),
            "reading_1": [60.0, 45.0, np.nan, np.nan],
            "reading_2": [60.0, 55.0, 52.0, np.nan],
            "irr_time": [2.0, 12.0, 12.0, 12.0],
            "outflow_gal": [500.0, 1200.0, np.nan, 800.0],
        }
    )


@pytest.fixture
def observations_with_runoff(observations):
    df = observations.copy()
    df["runoff_time"] = [30.0, 240.0, np.nan, 90.0]
    return df
