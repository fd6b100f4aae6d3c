"""
Unit conversion factors, field defaults and column names.
"""
from typing import Final, List, Tuple

# Unit conversions
LITERS_TO_GALLONS: Final[float] = 0.264172
GALLONS_TO_ACRE_FEET: Final[float] = 0.0000036889
INCHES_PER_FOOT: Final[float] = 12.0
MM_PER_INCH: Final[float] = 25.4
SQFT_PER_ACRE: Final[float] = 43560.0
SECONDS_PER_MINUTE: Final[float] = 60.0
MINUTES_PER_HOUR: Final[float] = 60.0

# Field geometry of the 2022 CSU furrow trial
DEFAULT_BUCKET_SIZE_L: Final[float] = 7.2
DEFAULT_ROW_SPACING_IN: Final[float] = 30.0
DEFAULT_FIELD_LENGTH_FT: Final[float] = 1050.0
DEFAULT_NUM_ROWS_DIVERTED: Final[int] = 2

# Input columns
COL_PLOT: Final[str] = "plot"
COL_REP: Final[str] = "rep"
COL_DATE: Final[str] = "date"
COL_READING_1: Final[str] = "reading_1"
COL_READING_2: Final[str] = "reading_2"
COL_IRR_TIME: Final[str] = "irr_time"
COL_OUTFLOW_GAL: Final[str] = "outflow_gal"
COL_RUNOFF_TIME: Final[str] = "runoff_time"  # optional, minutes

REQUIRED_COLUMNS: Final[Tuple[str, ...]] = (
    COL_PLOT, COL_REP, COL_DATE,
    COL_READING_1, COL_READING_2,
    COL_IRR_TIME, COL_OUTFLOW_GAL,
)
OPTIONAL_COLUMNS: Final[Tuple[str, ...]] = (COL_RUNOFF_TIME,)

# Columns coerced to float before the stages run
NUMERIC_INPUT_COLUMNS: Final[Tuple[str, ...]] = (
    COL_READING_1, COL_READING_2, COL_IRR_TIME, COL_OUTFLOW_GAL, COL_RUNOFF_TIME,
)

DEFAULT_DATE_FORMAT: Final[str] = "%m/%d/%y"

# Inflow stage outputs
INF_AVG_SEC: Final[str] = "inf.avg.sec"
INF_AVG_GPM: Final[str] = "inf.avg.gpm"
INF_GAL_TRT: Final[str] = "inf.gal.trt"
INF_ACREFT_TRT: Final[str] = "inf.acreft.trt"
INF_ACREIN_TRT: Final[str] = "inf.acrein.trt"
INF_IN_TRT: Final[str] = "inf.in.trt"
INF_MM_TRT: Final[str] = "inf.mm.trt"

# Outflow stage outputs
OUT_ACREFT_TRT: Final[str] = "out.acreft.trt"
OUT_ACREIN_TRT: Final[str] = "out.acrein.trt"
OUT_IN_TRT: Final[str] = "out.in.trt"
OUT_MM_TRT: Final[str] = "out.mm.trt"
RUNOFF_TIME_HRS: Final[str] = "runoff.time.hrs"
RUNOFF_START_TIME_HR: Final[str] = "runoff.start.time.hr"

# Infiltration stage outputs
INFILTRATION_IN: Final[str] = "infiltration.in"
INFILTRATION_MM: Final[str] = "infiltration.mm"
INFILTRATION_RATE_MMHR: Final[str] = "infiltration.rate.mmhr"
# Efficiency assuming zero deep percolation. Not a valid application efficiency.
BAD_EFF: Final[str] = "bad_eff"

STAGE_COLUMNS: Final[dict] = {
    "inflow": [INF_AVG_SEC, INF_AVG_GPM, INF_GAL_TRT, INF_ACREFT_TRT,
               INF_ACREIN_TRT, INF_IN_TRT, INF_MM_TRT],
    "outflow": [OUT_ACREFT_TRT, OUT_ACREIN_TRT, OUT_IN_TRT, OUT_MM_TRT],
    "runoff": [RUNOFF_TIME_HRS, RUNOFF_START_TIME_HR],
    "infiltration": [INFILTRATION_IN, INFILTRATION_MM,
                     INFILTRATION_RATE_MMHR, BAD_EFF],
}

DERIVED_COLUMNS: Final[List[str]] = (
    STAGE_COLUMNS["inflow"]
    + STAGE_COLUMNS["outflow"]
    + STAGE_COLUMNS["runoff"]
    + STAGE_COLUMNS["infiltration"]
)
