from __future__ import annotations
from typing import Any
import pandas as pd
from covidregion.util.config import config
from covidregion.util.error import SubsetNotFoundError
from covidregion.util.filer import Filer
from covidregion.util.validator import Validator
from covidregion.util.term import Term, SELECTED_COUNTRIES, FATAL_SCALE
from covidregion.engineering.subset import country_level
from covidregion.trend.smoother import TrendSmoother
from covidregion.regression.ols import LinearRegressor, RegressionResult
from covidregion.visualization.bar_plot import bar_plot
from covidregion.visualization.dual_axis_plot import dual_axis_plot
from covidregion.visualization.line_plot import line_plot


class RegionalReport(Term):
    """Descriptive figures and regression analysis of the selected records.

    Args:
        data: records created with covidregion.DataEngineer().all()
            Index
                reset index
            Columns
                - Province (str): province/state names or empty strings
                - Country (str): country names
                - Date (pandas.Timestamp): observation dates
                - Confirmed (pandas.Int64): the number of confirmed cases
                - Fatal (pandas.Int64): the number of fatal cases
                - Population (pandas.Int64): population values
                - the other columns will be ignored
        selected: countries for dual-axis charts and regression or None (SELECTED_COUNTRIES)
        frac: the fraction of the data used when estimating each smoothed value

    Note:
        Records of provinces are summed up with country names and dates. Population of a country is the total of
        the provinces found in the records (at any date), regardless of whether each province has records on each date.
        Provinces without any positive records are not counted. Population is NA when one of the provinces has NA.
    """

    def __init__(self, data: pd.DataFrame, selected: list[str] | tuple[str, ...] | None = None, frac: float = 0.75) -> None:
        df = Validator(data, "data").dataframe(columns=[self.PROVINCE, self.COUNTRY, self.DATE, self.C, self.F, self.N], empty_ok=False)
        self._df = country_level(df)
        self._selected = Validator(selected, "selected").sequence(default=SELECTED_COUNTRIES, unique=True)
        self._smoother = TrendSmoother(self._df, frac=frac)
        self._regressor = LinearRegressor(self._df)

    def countries(self) -> list[str]:
        """Return the list of country names included in the records.
        """
        return sorted(self._df[self.COUNTRY].unique())

    def cases_trend(self, filename: str | None = None, **kwargs: Any) -> pd.DataFrame:
        """Show smoothed trend of the number of confirmed cases, one line for each country.

        Args:
            filename: filename to save the figure or None (display)
            **kwargs: keyword arguments of covidregion.line_plot()

        Returns:
            Index
                Date (pandas.Timestamp): observation dates
            Columns
                country names
            Values
                (numpy.float64): smoothed number of confirmed cases
        """
        df = self._smoother.smooth(variable=self.C)
        line_plot(
            df=df, filename=filename, **Validator(kwargs, "keyword arguments").dict(
                default={"title": f"Smoothed trend of {self.C} cases", "ylabel": f"{self.C} cases"}))
        return df

    def population(self, filename: str | None = None, **kwargs: Any) -> pd.Series:
        """Show population values of the countries with a bar chart.

        Args:
            filename: filename to save the figure or None (display)
            **kwargs: keyword arguments of covidregion.bar_plot()

        Returns:
            population values of the countries (numpy.float64), indexed with country names

        Note:
            Population is constant for a country, so the first record of each country is used.
        """
        series = self._df.drop_duplicates(subset=self.COUNTRY).set_index(self.COUNTRY)[self.N].astype("float64")
        series.index.name = None
        bar_plot(
            df=series, filename=filename, show_legend=False, **Validator(kwargs, "keyword arguments").dict(
                default={"title": f"{self.N} of the countries", "ylabel": self.N}))
        return series

    def per_capita_trend(self, filename: str | None = None, **kwargs: Any) -> pd.DataFrame:
        """Show smoothed trend of the number of confirmed cases per capita, one line for each country.

        Args:
            filename: filename to save the figure or None (display)
            **kwargs: keyword arguments of covidregion.line_plot()

        Returns:
            Index
                Date (pandas.Timestamp): observation dates
            Columns
                country names
            Values
                (numpy.float64): smoothed number of confirmed cases per capita, NaN when population is unknown

        Note:
            Countries without population values are shown in the legend without lines.
        """
        df = self._smoother.smooth(variable=self.C_PC)
        unknown = [col for col in df.columns if df[col].isna().all()]
        if unknown:
            config.warning(f"{self.N} values of {', '.join(unknown)} are unknown and per-capita values were not calculated")
        line_plot(
            df=df, filename=filename, **Validator(kwargs, "keyword arguments").dict(
                default={"title": f"Smoothed trend of {self.C} cases per capita", "ylabel": f"{self.C} cases per capita"}))
        return df

    def dual_axis(self, country: str, filename: str | None = None, scale: float = FATAL_SCALE, **kwargs: Any) -> pd.DataFrame:
        """Show the number of confirmed/fatal cases of the country with two y axes.

        Args:
            country: country name
            filename: filename to save the figure or None (display)
            scale: ratio of the right axis (Fatal) to the left axis (Confirmed), refer to covidregion.FATAL_SCALE
            **kwargs: keyword arguments of covidregion.dual_axis_plot()

        Raises:
            SubsetNotFoundError: no records of the country

        Returns:
            Index
                Date (pandas.Timestamp): observation dates
            Columns
                - Confirmed (pandas.Int64): the number of confirmed cases
                - Fatal (pandas.Int64): the number of fatal cases
        """
        df = self._subset(country=country).set_index(self.DATE).loc[:, self.VALUE_COLUMNS]
        dual_axis_plot(
            df=df, left=self.C, right=self.F, filename=filename, scale=scale,
            **Validator(kwargs, "keyword arguments").dict(default={"title": f"{self.C} and {self.F} cases in {country}"}))
        return df

    def regression(self, country: str) -> RegressionResult:
        """Fit ordinary least squares regression, Fatal ~ Confirmed + Date, with the records of the country.

        Args:
            country: country name

        Raises:
            SubsetNotFoundError: no records of the country
            NotEnoughDataError: 3 or less records are available

        Returns:
            regression result
        """
        return self._regressor.fit(country=country)

    def run(self, filer: Filer | None = None) -> dict[str, RegressionResult]:
        """Create all figures and fit regression models with the selected countries.

        Args:
            filer: Filer instance to create filenames of the figures or None (display the figures)

        Returns:
            regression results of the selected countries (keys: country names)
        """
        def _filename(title):
            return None if filer is None else filer.png(title)["filename"]

        with config.stage("descriptive figures"):
            self.cases_trend(filename=_filename("cases_trend"))
            self.population(filename=_filename("population"))
            self.per_capita_trend(filename=_filename("per_capita_trend"))
        results = {}
        for country in self._selected:
            with config.stage(f"analysis of {country}"):
                self.dual_axis(country=country, filename=_filename(f"dual_axis_{country}"))
                results[country] = self.regression(country=country)
            config.info(f"Regression analysis with the records of {country} was completed")
        return results

    def _subset(self, country):
        """Return the records of the country.

        Raises:
            SubsetNotFoundError: no records of the country
        """
        df = self._df.loc[self._df[self.COUNTRY] == country]
        if df.empty:
            raise SubsetNotFoundError(country=country)
        return df.reset_index(drop=True)
