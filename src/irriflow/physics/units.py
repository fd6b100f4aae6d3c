"""
Vectorised unit conversions shared by the calculation stages.

All helpers take and return pandas Series. Missing values propagate through
the arithmetic; results that are not finite (division by zero) are stored as
missing rather than as +/-inf.
"""
import numpy as np
import pandas as pd

from irriflow.core.constants import (
    GALLONS_TO_ACRE_FEET, INCHES_PER_FOOT, LITERS_TO_GALLONS, MM_PER_INCH,
    SECONDS_PER_MINUTE,
)


def as_finite(values: pd.Series) -> pd.Series:
    """Replace +/-inf with NaN and return a float Series."""
    return values.astype(float).replace([np.inf, -np.inf], np.nan)


def fill_time_to_gpm(fill_seconds: pd.Series, bucket_size_l: float) -> pd.Series:
    """Bucket fill time (s) to flow rate (gal/min)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        gpm = (bucket_size_l / fill_seconds) * SECONDS_PER_MINUTE * LITERS_TO_GALLONS
    return as_finite(gpm)


def gallons_to_acre_feet(gallons: pd.Series) -> pd.Series:
    return as_finite(gallons * GALLONS_TO_ACRE_FEET)


def acre_feet_to_acre_inches(acre_feet: pd.Series) -> pd.Series:
    return as_finite(acre_feet * INCHES_PER_FOOT)


def acre_inches_to_depth_in(acre_inches: pd.Series, acreage: float) -> pd.Series:
    """Volume over a known acreage to depth of water, inches."""
    with np.errstate(divide="ignore", invalid="ignore"):
        depth = acre_inches / acreage
    return as_finite(depth)


def depth_in_to_trt_mm(depth_in: pd.Series) -> pd.Series:
    # Divides by 25.4 to match the trial workbook's *.mm.trt columns;
    # inches_to_mm() is the true unit conversion.
    return as_finite(depth_in / MM_PER_INCH)


def inches_to_mm(inches: pd.Series) -> pd.Series:
    return as_finite(inches * MM_PER_INCH)


def safe_divide(numerator: pd.Series, denominator) -> pd.Series:
    """Element-wise division where x/0 becomes NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        result = numerator / denominator
    return as_finite(result)
