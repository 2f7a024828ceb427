from __future__ import annotations
import numpy as np
import pandas as pd
import statsmodels.api as sm
from covidregion.util.error import NotEnoughDataError, SubsetNotFoundError
from covidregion.util.validator import Validator
from covidregion.util.term import Term


class RegressionResult(Term):
    """Result of ordinary least squares regression.

    Args:
        name: name of the result, like country names
        table: coefficient table with "Estimate", "Std. Error", "t value" and "p-value" columns
        r_squared: coefficient of determination
        nobs: the number of observations
        formula: description of the model
    """
    ESTIMATE = "Estimate"
    STD_ERROR = "Std. Error"
    T_VALUE = "t value"
    P_VALUE = "p-value"

    def __init__(self, name: str, table: pd.DataFrame, r_squared: float, nobs: int, formula: str) -> None:
        self.name = name
        self.table = table
        self.r_squared = r_squared
        self.nobs = nobs
        self.formula = formula

    def p_values(self) -> pd.Series:
        """Return p-values of the intercept and the predictors.
        """
        return self.table[self.P_VALUE]

    def summary(self) -> str:
        """Return the summary as a text.
        """
        lines = [
            f"{self.name}: {self.formula}",
            self.table.to_string(float_format=lambda x: f"{x:.4g}"),
            f"R-squared: {self.r_squared:.4f}, observations: {self.nobs}",
        ]
        return "\n".join(lines)


class LinearRegressor(Term):
    """Ordinary least squares regression of the number of fatal cases on the number of confirmed cases and dates.

    Args:
        data: records
            Index
                reset index
            Columns
                - Country (str): country names
                - Date (pandas.Timestamp): observation dates
                - Confirmed (pandas.Int64): the number of confirmed cases
                - Fatal (pandas.Int64): the number of fatal cases

    Note:
        Dates are converted to the number of days since 01Jan1970.
    """
    INTERCEPT = "Intercept"

    def __init__(self, data: pd.DataFrame) -> None:
        self._df = Validator(data, "data").dataframe(columns=[self.COUNTRY, self.DATE, self.C, self.F])

    def fit(self, country: str) -> RegressionResult:
        """Fit Fatal ~ Confirmed + Date with the records of the country.

        Args:
            country: country name

        Raises:
            SubsetNotFoundError: no records of the country
            NotEnoughDataError: 3 or less records are available without NAs

        Returns:
            regression result

        Note:
            Records of provinces will be summed up with dates. Records with NAs will be ignored.
        """
        df = self._df.loc[self._df[self.COUNTRY] == country]
        if df.empty:
            raise SubsetNotFoundError(country=country)
        df = df.groupby(self.DATE)[[self.C, self.F]].sum(min_count=1).astype("float64").dropna().reset_index()
        if len(df) <= len(self.VALUE_COLUMNS) + 1:
            raise NotEnoughDataError(
                name=f"records of {country}", value=df, required_n=len(self.VALUE_COLUMNS) + 1,
                details="Records with NAs were ignored")
        x = pd.DataFrame({
            self.C: df[self.C],
            self.DATE: (df[self.DATE] - pd.Timestamp("1970-01-01")).dt.days.astype(np.float64),
        })
        result = sm.OLS(df[self.F], sm.add_constant(x, prepend=True, has_constant="add")).fit()
        table = pd.DataFrame({
            RegressionResult.ESTIMATE: result.params,
            RegressionResult.STD_ERROR: result.bse,
            RegressionResult.T_VALUE: result.tvalues,
            RegressionResult.P_VALUE: result.pvalues,
        }).rename(index={"const": self.INTERCEPT})
        return RegressionResult(
            name=country, table=table, r_squared=float(result.rsquared), nobs=int(result.nobs),
            formula=f"{self.F} ~ {self.C} + {self.DATE}")
