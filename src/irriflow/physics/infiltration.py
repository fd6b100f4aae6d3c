"""
Infiltration stage: net infiltration and a naive efficiency.

Infiltration here is simply inflow depth minus outflow depth over the set.

bad_eff is (1 - outflow/inflow) * 100, which is an application efficiency
only if no water percolates below the root zone. That assumption does not
hold for furrow irrigation, so bad_eff overstates efficiency and must not be
reported as one. It is kept because trial sheets track it for comparison.
"""

import logging

import pandas as pd

from irriflow.core.constants import (
    BAD_EFF, COL_IRR_TIME, INF_IN_TRT, INFILTRATION_IN, INFILTRATION_MM,
    INFILTRATION_RATE_MMHR, OUT_IN_TRT,
)
from irriflow.physics.units import as_finite, inches_to_mm, safe_divide

logger = logging.getLogger(__name__)

BAD_EFF_CAVEAT = (
    "bad_eff assumes zero deep percolation and is not a valid application efficiency"
)


def naive_efficiency_pct(inflow_in: pd.Series, outflow_in: pd.Series) -> pd.Series:
    """Percent of inflow not leaving as runoff, assuming no deep percolation."""
    return as_finite((1 - safe_divide(outflow_in, inflow_in)) * 100)


def compute_infiltration(df: pd.DataFrame) -> pd.DataFrame:
    """
    Append infiltration and naive efficiency columns.

    Expects the columns produced by the inflow and outflow stages.
    """
    result = df.copy()

    result[INFILTRATION_IN] = as_finite(result[INF_IN_TRT] - result[OUT_IN_TRT])
    result[INFILTRATION_MM] = inches_to_mm(result[INFILTRATION_IN])
    # mm/hr over the whole set
    result[INFILTRATION_RATE_MMHR] = safe_divide(result[INFILTRATION_MM], result[COL_IRR_TIME])
    result[BAD_EFF] = naive_efficiency_pct(result[INF_IN_TRT], result[OUT_IN_TRT])

    return result
