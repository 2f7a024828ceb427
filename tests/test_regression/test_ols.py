import numpy as np
import pandas as pd
import pytest
from covidregion import LinearRegressor, RegressionResult, Term, NotEnoughDataError, SubsetNotFoundError


class TestLinearRegressor(object):
    def test_fit(self, records):
        result = LinearRegressor(records).fit(country="India")
        assert isinstance(result, RegressionResult)
        assert result.nobs == 8
        assert result.table.index.tolist() == ["Intercept", Term.C, Term.DATE]
        assert result.table.columns.tolist() == ["Estimate", "Std. Error", "t value", "p-value"]
        assert 0 <= result.r_squared <= 1
        assert result.p_values().between(0, 1).all()
        assert result.summary().startswith("India: Fatal ~ Confirmed + Date")

    def test_estimates(self, records):
        df = records.loc[records[Term.COUNTRY] == "Pakistan"]
        x = np.column_stack([
            np.ones(len(df)),
            df[Term.C].astype("float64").to_numpy(),
            (df[Term.DATE] - pd.Timestamp("1970-01-01")).dt.days.to_numpy(dtype=np.float64),
        ])
        expected, *_ = np.linalg.lstsq(x, df[Term.F].astype("float64").to_numpy(), rcond=None)
        result = LinearRegressor(records).fit(country="Pakistan")
        assert np.allclose(result.table["Estimate"].to_numpy(), expected)

    def test_reproducible(self, records):
        first = LinearRegressor(records).fit(country="Canada")
        second = LinearRegressor(records).fit(country="Canada")
        pd.testing.assert_frame_equal(first.table, second.table)
        assert first.summary() == second.summary()
        # Provinces are summed up with dates
        assert first.nobs == 9

    def test_error(self, records):
        with pytest.raises(SubsetNotFoundError):
            LinearRegressor(records).fit(country="Nepal")
        few_df = records.loc[(records[Term.COUNTRY] != "India") | (records[Term.DATE] < pd.Timestamp("2020-01-27"))]
        with pytest.raises(NotEnoughDataError):
            LinearRegressor(few_df).fit(country="India")

    def test_na(self, records):
        df = records.copy()
        df.loc[df[Term.COUNTRY] == "India", Term.F] = pd.NA
        with pytest.raises(NotEnoughDataError):
            LinearRegressor(df).fit(country="India")
