import numpy as np
import pandas as pd
import pytest
from covidregion import TrendSmoother, Term, DuplicatedKeyError, UnExpectedValueRangeError, NotIncludedError


@pytest.fixture(scope="function")
def linear_df():
    dates = pd.date_range("2020-03-01", periods=10, freq="D")
    return pd.concat([
        pd.DataFrame({Term.COUNTRY: "India", Term.DATE: dates, Term.C: np.arange(10) * 10.0 + 5}),
        pd.DataFrame({Term.COUNTRY: "Pakistan", Term.DATE: dates[:2], Term.C: [1.0, 4.0]}),
    ], ignore_index=True)


class TestTrendSmoother(object):
    def test_actual(self, linear_df):
        df = TrendSmoother(linear_df).actual(variable=Term.C)
        assert df.columns.tolist() == ["India", "Pakistan"]
        assert isinstance(df.index, pd.DatetimeIndex)
        assert len(df) == 10
        assert df["Pakistan"].isna().sum() == 8

    def test_smooth_linear(self, linear_df):
        smoother = TrendSmoother(linear_df, frac=0.75, it=0)
        df = smoother.smooth(variable=Term.C)
        assert df.shape == (10, 2)
        assert np.allclose(df["India"].to_numpy(), np.arange(10) * 10.0 + 5)

    def test_smooth_short(self, linear_df):
        df = TrendSmoother(linear_df).smooth(variable=Term.C)
        assert df["Pakistan"].iloc[:2].tolist() == [1.0, 4.0]
        assert df["Pakistan"].iloc[2:].isna().all()

    def test_smooth_noise(self):
        dates = pd.date_range("2020-03-01", periods=30, freq="D")
        rng = np.random.default_rng(0)
        values = np.arange(30) * 2.0 + rng.normal(0, 3, 30)
        data = pd.DataFrame({Term.COUNTRY: "India", Term.DATE: dates, Term.C: values})
        smoothed = TrendSmoother(data).smooth(variable=Term.C)["India"]
        assert smoothed.notna().all()
        # Smoothed values vary less than the actual values
        assert np.diff(smoothed.to_numpy()).std() < np.diff(values).std()

    def test_order(self, linear_df):
        df = TrendSmoother(linear_df).smooth(variable=Term.C)
        shuffled_df = linear_df.sample(frac=1, random_state=0).reset_index(drop=True)
        pd.testing.assert_frame_equal(TrendSmoother(shuffled_df).smooth(variable=Term.C), df)

    def test_invalid(self, linear_df):
        with pytest.raises(DuplicatedKeyError):
            TrendSmoother(pd.concat([linear_df, linear_df.head(1)], ignore_index=True))
        with pytest.raises(UnExpectedValueRangeError):
            TrendSmoother(linear_df, frac=1.5)
        with pytest.raises(NotIncludedError):
            TrendSmoother(linear_df).smooth(variable=Term.F)
