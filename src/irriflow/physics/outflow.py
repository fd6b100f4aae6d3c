"""
Outflow stage: water leaving the field, measured by the flume.

Converts flume gallons to volume and depth, and when the trial recorded how
long runoff lasted, when runoff started within the set.
"""

import logging
from typing import Optional

import pandas as pd

from irriflow.core.config import FieldGeometryConfig
from irriflow.core.constants import (
    COL_IRR_TIME, COL_OUTFLOW_GAL, COL_RUNOFF_TIME, MINUTES_PER_HOUR,
    OUT_ACREFT_TRT, OUT_ACREIN_TRT, OUT_IN_TRT, OUT_MM_TRT,
    RUNOFF_START_TIME_HR, RUNOFF_TIME_HRS,
)
from irriflow.data.contracts import has_runoff_time
from irriflow.physics.units import (
    acre_feet_to_acre_inches, acre_inches_to_depth_in, as_finite,
    depth_in_to_trt_mm, gallons_to_acre_feet,
)

logger = logging.getLogger(__name__)


def compute_runoff_timing(df: pd.DataFrame) -> pd.DataFrame:
    """Append runoff duration (h) and runoff start offset within the set (h)."""
    result = df.copy()
    result[RUNOFF_TIME_HRS] = as_finite(result[COL_RUNOFF_TIME] / MINUTES_PER_HOUR)
    result[RUNOFF_START_TIME_HR] = as_finite(result[COL_IRR_TIME] - result[RUNOFF_TIME_HRS])
    return result


def compute_outflow(df: pd.DataFrame,
                    geometry: Optional[FieldGeometryConfig] = None,
                    include_runoff: Optional[bool] = None) -> pd.DataFrame:
    """
    Append outflow columns to an observation table.

    Args:
        df: Table with outflow_gal and irr_time, optionally runoff_time.
        geometry: Field layout; defaults to FieldGeometryConfig().
        include_runoff: Whether to derive the runoff timing columns. When
            None it is resolved from the presence of the runoff_time column.

    Returns:
        Copy of df with out.* columns, plus runoff.* columns when requested.
    """
    geometry = geometry or FieldGeometryConfig()
    if include_runoff is None:
        include_runoff = has_runoff_time(df)

    result = df.copy()
    result[OUT_ACREFT_TRT] = gallons_to_acre_feet(result[COL_OUTFLOW_GAL])
    result[OUT_ACREIN_TRT] = acre_feet_to_acre_inches(result[OUT_ACREFT_TRT])
    result[OUT_IN_TRT] = acre_inches_to_depth_in(result[OUT_ACREIN_TRT], geometry.acreage_row)
    result[OUT_MM_TRT] = depth_in_to_trt_mm(result[OUT_IN_TRT])

    if include_runoff:
        result = compute_runoff_timing(result)
    else:
        logger.debug("No runoff_time column; skipping runoff timing")

    return result
