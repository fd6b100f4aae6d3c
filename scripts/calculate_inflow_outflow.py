#!/usr/bin/env python
"""
Calculate inflow, outflow and infiltration for a surface-irrigation trial.

Reads the trial CSV (plot, rep, date, reading_1, reading_2, irr_time,
outflow_gal, optional runoff_time), runs the calculator and writes the result.

Usage:
  python scripts/calculate_inflow_outflow.py --data water_data.csv --out results.csv
  python scripts/calculate_inflow_outflow.py --data water_data.csv --preview 10
"""

from __future__ import annotations

import argparse
import logging
import sys

import pandas as pd

from irriflow.core.config import FieldGeometryConfig, IrriflowConfig
from irriflow.core.exceptions import IrriflowError
from irriflow.pipeline.calculator import InflowOutflowCalculator


def build_config(args: argparse.Namespace) -> IrriflowConfig:
    config = IrriflowConfig.from_yaml(args.config) if args.config else IrriflowConfig()

    overrides = {
        "bucket_size_l": args.bucket_size_l,
        "row_spacing_in": args.row_spacing_in,
        "field_length_ft": args.field_length_ft,
        "num_rows_diverted": args.num_rows_diverted,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        geometry = FieldGeometryConfig(**{**config.geometry.model_dump(), **overrides})
        config = config.model_copy(update={"geometry": geometry})

    if args.log_level:
        config.logging.log_level = args.log_level
    return config


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Calculate irrigation inflow/outflow from bucket-fill and flume readings")
    parser.add_argument("--data", required=True,
                        help="Trial CSV with bucket fill times and flume gallons")
    parser.add_argument("--out", default=None,
                        help="Output CSV path (omit to only preview)")
    parser.add_argument("--config", default=None,
                        help="Optional YAML configuration file")
    parser.add_argument("--preview", type=int, default=0,
                        help="Print the first N rows of the result")
    parser.add_argument("--bucket-size-l", type=float, default=None)
    parser.add_argument("--row-spacing-in", type=float, default=None)
    parser.add_argument("--field-length-ft", type=float, default=None)
    parser.add_argument("--num-rows-diverted", type=int, default=None)
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    args = parser.parse_args(argv)

    config = build_config(args)
    logging.basicConfig(level=config.logging.log_level, format=config.logging.log_format)

    calculator = InflowOutflowCalculator(config)
    try:
        result = calculator.run_file(args.data, args.out)
    except IrriflowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.preview > 0:
        with pd.option_context("display.max_columns", None, "display.width", 200):
            print(result.head(args.preview).to_string(index=False))

    print(f"Rows: {calculator.metrics['rows_processed']}")
    print(f"Columns added: {len(calculator.metrics['columns_added'])}")
    if calculator.metrics["columns_dropped"]:
        print(f"Empty columns dropped: {', '.join(calculator.metrics['columns_dropped'])}")
    if args.out:
        print(f"Saved: {args.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
