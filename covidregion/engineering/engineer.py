from __future__ import annotations
import pandas as pd
from typing_extensions import Self
from covidregion.util.config import config
from covidregion.util.error import UnExecutedError
from covidregion.util.validator import Validator
from covidregion.util.term import Term
from covidregion.downloading.downloader import DataDownloader
from covidregion.engineering.reshape import reshape_wide
from covidregion.engineering.merge import merge_records, attach_population, combined_key
from covidregion.engineering.subset import filter_positive, filter_countries, per_capita


class DataEngineer(Term):
    """Class for data engineering: downloading, reshaping, merging and filtering the records.

    Args:
        countries: country names to select (exact and case-sensitive) or None (TARGET_COUNTRIES)
        duplicates: "first" or "raise", how to handle locations with multiple population values in the lookup table

    Examples:
        >>> import covidregion as cr
        >>> engineer = cr.DataEngineer()
        >>> df = engineer.download().reshape().merge().filter().all()
    """

    def __init__(self, countries: list[str] | tuple[str, ...] | None = None, duplicates: str = "first") -> None:
        self._countries = countries
        self._duplicates = Validator([duplicates], "duplicates").sequence(candidates=["first", "raise"])[0]
        self._citations: list[str] = []
        # Wide tables
        self._raw_dict: dict[str, pd.DataFrame] = {}
        # Long tables
        self._long_dict: dict[str, pd.DataFrame] = {}
        # Merged records
        self._df: pd.DataFrame | None = None

    def download(self, **kwargs) -> Self:
        """Download datasets using covidregion.DataDownloader and register them.

        Args:
            **kwargs: keyword arguments of covidregion.DataDownloader()

        Raises:
            DownloadError: failed in retrieving a remote file

        Returns:
            updated DataEngineer instance
        """
        downloader = DataDownloader(**kwargs)
        tables = downloader.download()
        return self.register(
            confirmed=tables.confirmed, fatal=tables.fatal, lookup=tables.lookup, citations=downloader.citations())

    def register(self, confirmed: pd.DataFrame, fatal: pd.DataFrame, lookup: pd.DataFrame,
                 citations: list[str] | str | None = None) -> Self:
        """Register raw tables.

        Args:
            confirmed: wide table of confirmed cases with Province/Country/Lat/Long columns and one column for each date
            fatal: wide table of fatal cases with the same layout as @confirmed
            lookup: location/population lookup table with Province/Country/Population columns
            citations: citations of the datasets or None (["my own dataset"])

        Returns:
            updated DataEngineer instance
        """
        self._raw_dict = {
            self.C: Validator(confirmed, "confirmed").dataframe(columns=self.WIDE_COLUMNS),
            self.F: Validator(fatal, "fatal").dataframe(columns=self.WIDE_COLUMNS),
            self.N: Validator(lookup, "lookup").dataframe(columns=[*self.AREA_COLUMNS, self.N]),
        }
        self._citations = [citations] if isinstance(citations, str) else (citations or ["my own dataset"])
        self._long_dict = {}
        self._df = None
        return self

    def reshape(self) -> Self:
        """Convert the wide tables of confirmed/fatal cases to long tables.

        Raises:
            UnExecutedError: raw tables have not been registered
            DateFormatError: some column labels could not be parsed as dates

        Returns:
            updated DataEngineer instance
        """
        if not self._raw_dict:
            raise UnExecutedError("DataEngineer.download() or DataEngineer.register()")
        with config.stage("reshape"):
            self._long_dict = {
                variable: reshape_wide(self._raw_dict[variable], value=variable) for variable in self.VALUE_COLUMNS}
        return self

    def merge(self) -> Self:
        """Merge the long tables of confirmed/fatal cases and add population values and combined keys.

        Raises:
            UnExecutedError: DataEngineer.reshape() has not been called

        Returns:
            updated DataEngineer instance
        """
        if not self._long_dict:
            raise UnExecutedError("DataEngineer.reshape()")
        with config.stage("merge"):
            df = merge_records(confirmed=self._long_dict[self.C], fatal=self._long_dict[self.F])
            df = attach_population(records=df, lookup=self._raw_dict[self.N], duplicates=self._duplicates)
            df[self.KEY] = combined_key(df)
        self._df = df.loc[:, self.COLUMNS]
        config.info(f"{len(self._df)} records of {self._df[self.KEY].nunique()} locations were merged")
        return self

    def filter(self) -> Self:
        """Select the records with positive number of confirmed cases in the countries.

        Raises:
            UnExecutedError: DataEngineer.merge() has not been called

        Returns:
            updated DataEngineer instance
        """
        if self._df is None:
            raise UnExecutedError("DataEngineer.merge()")
        with config.stage("filter"):
            df = filter_countries(filter_positive(self._df), countries=self._countries)
        config.info(f"{len(df)} records of {df[self.COUNTRY].nunique()} countries were selected")
        self._df = df
        return self

    def all(self) -> pd.DataFrame:
        """Return the current records.

        Raises:
            UnExecutedError: DataEngineer.merge() has not been called

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - Province (str): province/state names or empty strings
                    - Country (str): country names
                    - Date (pandas.Timestamp): observation dates
                    - Combined_Key (str): "{Province}, {Country}" or Country
                    - Confirmed (pandas.Int64): the number of confirmed cases
                    - Fatal (pandas.Int64): the number of fatal cases
                    - Population (pandas.Int64): population values
                    - Confirmed_per_capita (numpy.float64): Confirmed / Population
        """
        if self._df is None:
            raise UnExecutedError("DataEngineer.merge()")
        return self._df.assign(**{self.C_PC: per_capita(self._df)})

    def citations(self) -> list[str]:
        """Return citation list of the datasets.
        """
        return self._citations
