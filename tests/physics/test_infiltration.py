"""
Tests for the infiltration stage and the naive (zero deep percolation) efficiency.
"""
import numpy as np
import pandas as pd
import pytest

from irriflow.physics.inflow import compute_inflow
from irriflow.physics.outflow import compute_outflow
from irriflow.physics.infiltration import compute_infiltration, naive_efficiency_pct


@pytest.fixture
def staged(observations, geometry):
    return compute_outflow(compute_inflow(observations, geometry), geometry)


class TestComputeInfiltration:

    def test_infiltration_is_inflow_minus_outflow(self, staged):
        result = compute_infiltration(staged)
        defined = result["inf.in.trt"].notna() & result["out.in.trt"].notna()
        assert defined.sum() == 2

        np.testing.assert_array_equal(
            result.loc[defined, "infiltration.in"],
            result.loc[defined, "inf.in.trt"] - result.loc[defined, "out.in.trt"],
        )

    def test_depth_and_rate(self, staged):
        row = compute_infiltration(staged).iloc[1]
        assert row["infiltration.mm"] == pytest.approx(row["infiltration.in"] * 25.4)
        assert row["infiltration.rate.mmhr"] == pytest.approx(row["infiltration.mm"] / 12.0)

    def test_bad_eff(self, staged):
        row = compute_infiltration(staged).iloc[1]
        expected = (1 - row["out.in.trt"] / row["inf.in.trt"]) * 100
        assert row["bad_eff"] == pytest.approx(expected)

    def test_missing_side_propagates(self, staged):
        result = compute_infiltration(staged)
        # row 2 has no outflow, row 3 has no bucket readings
        assert np.isnan(result.loc[2, "infiltration.in"])
        assert np.isnan(result.loc[2, "bad_eff"])
        assert np.isnan(result.loc[3, "infiltration.in"])
        assert np.isnan(result.loc[3, "infiltration.rate.mmhr"])

    def test_zero_irrigation_time_gives_missing_rate(self, staged):
        df = staged.copy()
        df.loc[1, "irr_time"] = 0.0
        result = compute_infiltration(df)
        assert np.isnan(result.loc[1, "infiltration.rate.mmhr"])


class TestNaiveEfficiency:

    def test_zero_inflow_is_missing(self):
        eff = naive_efficiency_pct(pd.Series([0.0, 2.0]), pd.Series([1.0, 0.5]))
        assert np.isnan(eff.iloc[0])
        assert eff.iloc[1] == pytest.approx(75.0)

    def test_no_runoff_is_full_efficiency(self):
        eff = naive_efficiency_pct(pd.Series([1.5]), pd.Series([0.0]))
        assert eff.iloc[0] == pytest.approx(100.0)
