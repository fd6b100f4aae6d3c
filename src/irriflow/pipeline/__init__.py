"""
irriflow pipeline module.

Orchestrates the calculation stages over an observation table.
"""

from irriflow.pipeline.calculator import (
    InflowOutflowCalculator,
    calculate,
    drop_empty_columns,
)

__all__ = [
    "InflowOutflowCalculator",
    "calculate",
    "drop_empty_columns",
]
