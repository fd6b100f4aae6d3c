"""
Inflow/outflow calculator for surface-irrigation trials.
Runs the inflow, outflow and infiltration stages in order over one table.
"""
import pandas as pd
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from pathlib import Path
import logging

from irriflow.core.config import IrriflowConfig, get_config
from irriflow.core.constants import (
    COL_DATE, COL_PLOT, DERIVED_COLUMNS, NUMERIC_INPUT_COLUMNS, STAGE_COLUMNS,
)
from irriflow.core.exceptions import (
    DataValidationError, ErrorContext, IrriflowError, handle_exception,
)
from irriflow.core.types import ObservationTable, StageName
from irriflow.data.contracts import check_required_columns, has_runoff_time
from irriflow.data.io import read_observations, write_results
from irriflow.physics.inflow import compute_inflow
from irriflow.physics.outflow import compute_outflow
from irriflow.physics.infiltration import BAD_EFF_CAVEAT, compute_infiltration


def drop_empty_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Drop every column whose values are missing in all rows."""
    return df.loc[:, df.notna().any(axis=0)]


class InflowOutflowCalculator:
    """
    Computes inflow, outflow and infiltration metrics for a trial table.

    The stages must run in order; each appends columns to the table produced
    by the previous one. Columns left entirely empty afterwards (for example
    the runoff columns when no runoff was recorded) are pruned.
    """

    def __init__(self, config: Optional[IrriflowConfig] = None):
        self.config = config or get_config()
        self.logger = logging.getLogger("irriflow.pipeline.calculator")

        # Run tracking
        self.metrics: Dict[str, Any] = {
            "rows_processed": 0,
            "columns_added": [],
            "columns_dropped": [],
            "stage_columns": {},
            "runoff_time_present": False,
            "total_time_ms": 0.0,
        }

    @property
    def geometry(self):
        return self.config.geometry

    def run(self, df: ObservationTable) -> pd.DataFrame:
        """
        Run all stages on an observation table.

        Args:
            df: Parsed observation table (see irriflow.data.contracts).

        Returns:
            New DataFrame with the original and derived columns, minus
            columns that are missing in every row.

        Raises:
            MissingColumnError: a required input column is absent.
            DataValidationError: a measurement column holds non-numeric text.
        """
        start_time = datetime.now()
        self.logger.info(f"Calculating inflow/outflow for {len(df)} observations")

        try:
            # Step 1: Check shape and coerce measurements
            table = self._prepare(df)

            # Whole-table flag, resolved once
            include_runoff = has_runoff_time(table)

            # Step 2: Inflow
            self.logger.debug("Step 2: %s stage", StageName.INFLOW.value)
            table = compute_inflow(table, self.geometry)

            # Step 3: Outflow
            self.logger.debug("Step 3: %s stage", StageName.OUTFLOW.value)
            table = compute_outflow(table, self.geometry, include_runoff=include_runoff)

            # Step 4: Infiltration
            self.logger.debug("Step 4: %s stage", StageName.INFILTRATION.value)
            table = compute_infiltration(table)
            self.logger.warning(BAD_EFF_CAVEAT)

            # Step 5: Prune all-missing columns
            computed_columns = list(table.columns)
            if self.config.io.drop_empty_columns:
                table = drop_empty_columns(table)

        except IrriflowError as e:
            self.logger.error(f"Inflow/outflow calculation failed: {e}")
            raise
        except Exception as e:
            self.logger.error(f"Inflow/outflow calculation failed: {e}")
            raise handle_exception(e, ErrorContext(component="calculator", operation="run")) from e

        processing_time = (datetime.now() - start_time).total_seconds() * 1000
        self.metrics["rows_processed"] = len(table)
        self.metrics["columns_added"] = [c for c in DERIVED_COLUMNS if c in table.columns]
        self.metrics["stage_columns"] = {
            stage: [c for c in columns if c in table.columns]
            for stage, columns in STAGE_COLUMNS.items()
        }
        self.metrics["columns_dropped"] = [c for c in computed_columns if c not in table.columns]
        self.metrics["runoff_time_present"] = include_runoff
        self.metrics["total_time_ms"] = processing_time

        self.logger.info(
            f"Calculated {len(self.metrics['columns_added'])} columns for {len(table)} rows "
            f"in {processing_time:.0f}ms"
        )
        if self.metrics["columns_dropped"]:
            self.logger.info(f"Dropped empty columns: {self.metrics['columns_dropped']}")

        return table

    def run_file(self, input_path: Union[str, Path],
                 output_path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
        """Read an observation CSV, run all stages and optionally write the result."""
        df = read_observations(input_path, self.config.io)
        result = self.run(df)

        if output_path is not None:
            write_results(result, output_path, self.config.io)

        return result

    def _prepare(self, df: pd.DataFrame) -> pd.DataFrame:
        """Check required columns and coerce measurement columns to float."""
        check_required_columns(df, component="calculator")

        table = df.copy()
        for col in self._numeric_columns(table):
            try:
                table[col] = pd.to_numeric(table[col], errors="raise").astype(float)
            except (ValueError, TypeError) as e:
                raise DataValidationError(
                    f"Column '{col}' must be numeric: {e}",
                    self._row_context(table, col),
                ) from e
        return table

    @staticmethod
    def _row_context(df: pd.DataFrame, col: str) -> ErrorContext:
        """Context naming the plot and date of the first non-numeric value in col."""
        coerced = pd.to_numeric(df[col], errors="coerce")
        bad = df.index[coerced.isna() & df[col].notna()]
        if len(bad) == 0:
            return ErrorContext(component="calculator", operation="prepare")

        row = df.loc[bad[0]]
        date = pd.to_datetime(row[COL_DATE], errors="coerce")
        return ErrorContext(
            plot=str(row[COL_PLOT]),
            date=date.strftime("%Y-%m-%d") if pd.notna(date) else str(row[COL_DATE]),
            component="calculator",
            operation="prepare",
            details={"column": col, "value": row[col]},
        )

    @staticmethod
    def _numeric_columns(df: pd.DataFrame) -> List[str]:
        return [c for c in NUMERIC_INPUT_COLUMNS if c in df.columns]


def calculate(df: pd.DataFrame, config: Optional[IrriflowConfig] = None) -> pd.DataFrame:
    """Run the full calculation with a one-off calculator."""
    return InflowOutflowCalculator(config).run(df)
