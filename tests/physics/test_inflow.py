"""
Tests for the inflow stage: bucket-fill averaging and the volume/depth chain.
"""
import numpy as np
import pandas as pd
import pytest

from irriflow.physics.inflow import average_fill_time, compute_inflow


class TestAverageFillTime:

    def test_both_readings_present(self, observations):
        avg = average_fill_time(observations)
        assert avg.iloc[0] == pytest.approx(60.0)
        assert avg.iloc[1] == pytest.approx(50.0)

    def test_one_reading_missing_uses_other(self, observations):
        avg = average_fill_time(observations)
        assert avg.iloc[2] == pytest.approx(52.0)

    def test_both_readings_missing_is_missing(self, observations):
        avg = average_fill_time(observations)
        assert np.isnan(avg.iloc[3])


class TestComputeInflow:

    def test_reference_row(self, observations, geometry):
        """7.2 L bucket filled in 60 s over a 2 h set"""
        row = compute_inflow(observations, geometry).iloc[0]

        assert row["inf.avg.sec"] == pytest.approx(60.0)
        assert row["inf.avg.gpm"] == pytest.approx(1.9020, rel=1e-4)
        assert row["inf.gal.trt"] == pytest.approx(228.24, rel=1e-4)
        assert row["inf.acreft.trt"] == pytest.approx(0.000842, rel=2e-3)
        assert row["inf.acrein.trt"] == pytest.approx(0.01011, rel=2e-3)
        assert row["inf.in.trt"] == pytest.approx(0.0839, rel=2e-3)
        assert row["inf.mm.trt"] == pytest.approx(0.00330, rel=2e-3)

    def test_unit_chain_identities(self, observations, geometry):
        result = compute_inflow(observations, geometry)
        defined = result["inf.in.trt"].notna()
        assert defined.sum() == 3

        np.testing.assert_allclose(
            result.loc[defined, "inf.in.trt"],
            result.loc[defined, "inf.acrein.trt"] / geometry.acreage_row,
        )
        np.testing.assert_allclose(
            result.loc[defined, "inf.mm.trt"],
            result.loc[defined, "inf.in.trt"] / 25.4,
        )
        np.testing.assert_allclose(
            result.loc[defined, "inf.acrein.trt"],
            result.loc[defined, "inf.acreft.trt"] * 12,
        )

    def test_missing_readings_propagate(self, observations, geometry):
        row = compute_inflow(observations, geometry).iloc[3]
        for col in ["inf.avg.sec", "inf.avg.gpm", "inf.gal.trt", "inf.in.trt", "inf.mm.trt"]:
            assert np.isnan(row[col]), col

    def test_zero_fill_time_is_missing_not_infinite(self, observations, geometry):
        df = observations.copy()
        df.loc[0, ["reading_1", "reading_2"]] = 0.0

        result = compute_inflow(df, geometry)
        assert np.isnan(result.loc[0, "inf.avg.gpm"])
        assert np.isnan(result.loc[0, "inf.in.trt"])
        assert not np.isinf(result.select_dtypes("number").to_numpy()).any()

    def test_missing_irrigation_time_propagates(self, observations, geometry):
        df = observations.copy()
        df.loc[1, "irr_time"] = np.nan

        result = compute_inflow(df, geometry)
        assert result.loc[1, "inf.avg.gpm"] == pytest.approx((7.2 / 50) * 60 * 0.264172)
        assert np.isnan(result.loc[1, "inf.gal.trt"])

    def test_input_not_modified(self, observations, geometry):
        before = observations.copy()
        compute_inflow(observations, geometry)
        pd.testing.assert_frame_equal(observations, before)

    def test_bucket_size_scales_rate(self, observations):
        from irriflow.core.config import FieldGeometryConfig

        small = compute_inflow(observations, FieldGeometryConfig(bucket_size_l=5.0))
        large = compute_inflow(observations, FieldGeometryConfig(bucket_size_l=10.0))
        assert large.loc[0, "inf.avg.gpm"] == pytest.approx(2 * small.loc[0, "inf.avg.gpm"])
