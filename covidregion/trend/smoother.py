from __future__ import annotations
import numpy as np
import pandas as pd
from statsmodels.nonparametric.smoothers_lowess import lowess
from covidregion.util.validator import Validator
from covidregion.util.term import Term


class TrendSmoother(Term):
    """Smooth time series of countries with LOWESS (locally weighted scatterplot smoothing).

    Args:
        data: records
            Index
                reset index
            Columns
                - Country (str): country names
                - Date (pandas.Timestamp): observation dates
                - columns of the variables to smooth
        frac: the fraction of the data used when estimating each value (span of local regression)
        it: the number of residual-based reweightings

    Note:
        Records must be unique with countries and dates. Row order of @data is not used.
    """
    # The number of records required for smoothing
    MIN_SIZE = 3

    def __init__(self, data: pd.DataFrame, frac: float = 0.75, it: int = 3) -> None:
        df = Validator(data, "data").dataframe(columns=[self.COUNTRY, self.DATE])
        self._df = Validator(df, "data").unique(columns=[self.COUNTRY, self.DATE])
        self._frac = Validator(frac, "frac").float(value_range=(0, 1))
        self._it = Validator(it, "it").int(value_range=(0, None))

    def actual(self, variable: str) -> pd.DataFrame:
        """Return the actual values as a pivot table.

        Args:
            variable: column name of the variable

        Returns:
            Index
                Date (pandas.Timestamp): observation dates
            Columns
                country names
            Values
                (numpy.float64): actual values, NaN when not recorded
        """
        Validator(self._df, "data").dataframe(columns=[variable])
        df = self._df.loc[:, [self.COUNTRY, self.DATE, variable]]
        df[variable] = df[variable].astype("float64")
        df = df.pivot(index=self.DATE, columns=self.COUNTRY, values=variable).sort_index()
        df.columns.name = None
        return df

    def smooth(self, variable: str) -> pd.DataFrame:
        """Return LOWESS-smoothed values as a pivot table.

        Args:
            variable: column name of the variable

        Returns:
            Index
                Date (pandas.Timestamp): observation dates
            Columns
                country names
            Values
                (numpy.float64): smoothed values, NaN when the actual values are NaN

        Note:
            When a country has less than 3 records, actual values will be returned as-is for the country.
        """
        actual_df = self.actual(variable=variable)
        return actual_df.apply(self._smooth_series, axis=0)

    def _smooth_series(self, series):
        """Smooth a series with DatetimeIndex, ignoring NaN values.
        """
        selected = series.notna().to_numpy()
        if selected.sum() < self.MIN_SIZE:
            return series
        x = (series.index[selected] - pd.Timestamp("1970-01-01")).days.to_numpy(dtype=np.float64)
        fitted = lowess(series.to_numpy()[selected], x, frac=self._frac, it=self._it, return_sorted=False)
        smoothed = pd.Series(np.nan, index=series.index, name=series.name)
        smoothed.iloc[np.flatnonzero(selected)] = fitted
        return smoothed
