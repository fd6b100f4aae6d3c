"""
Type definitions and type aliases for irriflow.
"""
from enum import Enum
from typing import Union

import pandas as pd
from typing_extensions import TypeAlias


# Type aliases for clarity
PlotID: TypeAlias = str
RepID: TypeAlias = Union[int, str]

# One row per plot/rep/date observation
ObservationTable: TypeAlias = pd.DataFrame


class StageName(str, Enum):
    """Calculation stages, in the order they must run"""
    INFLOW = "inflow"
    OUTFLOW = "outflow"
    INFILTRATION = "infiltration"
