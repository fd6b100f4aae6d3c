"""
Inflow stage: applied water from bucket-fill timings.

The inflow stream of each furrow is timed filling a bucket of known volume,
twice per set. The mean fill time gives a flow rate, which over the set
duration gives the volume applied, and over the area of one wet plus one dry
row gives the depth applied.
"""

import logging
from typing import Optional

import pandas as pd

from irriflow.core.config import FieldGeometryConfig
from irriflow.core.constants import (
    COL_IRR_TIME, COL_READING_1, COL_READING_2, MINUTES_PER_HOUR,
    INF_ACREFT_TRT, INF_ACREIN_TRT, INF_AVG_GPM, INF_AVG_SEC, INF_GAL_TRT,
    INF_IN_TRT, INF_MM_TRT,
)
from irriflow.physics.units import (
    acre_feet_to_acre_inches, acre_inches_to_depth_in, as_finite,
    depth_in_to_trt_mm, fill_time_to_gpm, gallons_to_acre_feet,
)

logger = logging.getLogger(__name__)


def average_fill_time(df: pd.DataFrame) -> pd.Series:
    """
    Mean of the two bucket-fill readings, skipping missing values.

    One reading present gives that reading; both missing gives NaN.
    """
    return df[[COL_READING_1, COL_READING_2]].mean(axis=1, skipna=True)


def compute_inflow(df: pd.DataFrame, geometry: Optional[FieldGeometryConfig] = None) -> pd.DataFrame:
    """
    Append inflow columns to an observation table.

    Args:
        df: Table with reading_1, reading_2 (seconds) and irr_time (hours).
        geometry: Field layout; defaults to FieldGeometryConfig().

    Returns:
        Copy of df with inf.avg.sec through inf.mm.trt appended.
    """
    geometry = geometry or FieldGeometryConfig()
    result = df.copy()

    result[INF_AVG_SEC] = average_fill_time(result)
    result[INF_AVG_GPM] = fill_time_to_gpm(result[INF_AVG_SEC], geometry.bucket_size_l)
    # gpm * minutes in the set
    result[INF_GAL_TRT] = as_finite(result[INF_AVG_GPM] * result[COL_IRR_TIME] * MINUTES_PER_HOUR)
    result[INF_ACREFT_TRT] = gallons_to_acre_feet(result[INF_GAL_TRT])
    result[INF_ACREIN_TRT] = acre_feet_to_acre_inches(result[INF_ACREFT_TRT])
    result[INF_IN_TRT] = acre_inches_to_depth_in(result[INF_ACREIN_TRT], geometry.acreage_row)
    result[INF_MM_TRT] = depth_in_to_trt_mm(result[INF_IN_TRT])

    logger.debug(
        "Inflow: %d of %d rows have an applied depth (acreage_row=%.5f ac)",
        int(result[INF_IN_TRT].notna().sum()), len(result), geometry.acreage_row,
    )
    return result
