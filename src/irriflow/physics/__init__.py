"""Calculation stages for furrow irrigation inflow, outflow and infiltration."""
from irriflow.physics.inflow import average_fill_time, compute_inflow
from irriflow.physics.outflow import compute_outflow, compute_runoff_timing
from irriflow.physics.infiltration import (
    BAD_EFF_CAVEAT,
    compute_infiltration,
    naive_efficiency_pct,
)

__all__ = [
    # Inflow
    "average_fill_time",
    "compute_inflow",
    # Outflow
    "compute_outflow",
    "compute_runoff_timing",
    # Infiltration
    "BAD_EFF_CAVEAT",
    "compute_infiltration",
    "naive_efficiency_pct",
]
