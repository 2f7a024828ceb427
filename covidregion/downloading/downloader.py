from __future__ import annotations
from pathlib import Path
from typing import NamedTuple
import pandas as pd
from covidregion.util.config import config
from covidregion.util.validator import Validator
from covidregion.util.term import Term
from covidregion.downloading._db_jhu import _JHU


class SourceTables(NamedTuple):
    """Raw tables retrieved from the data sources.

    Attributes:
        confirmed: wide table of the cumulative number of confirmed cases
        fatal: wide table of the cumulative number of fatal cases
        lookup: location/population lookup table
    """
    confirmed: pd.DataFrame
    fatal: pd.DataFrame
    lookup: pd.DataFrame


class DataDownloader(Term):
    """Class to download the time series of COVID-19 cases/deaths and population values.

    Args:
        confirmed: URL or local path of the wide table of confirmed cases or None (JHU CSSE global time series)
        fatal: URL or local path of the wide table of fatal cases or None (JHU CSSE global time series)
        lookup: URL or local path of the UID/population lookup table or None (JHU CSSE lookup table)
        timeout: timeout of connection and reading of each file [sec]
        retries: the number of retries of each file when connection failed or the server returned 429/5xx
        backoff_factor: factor of exponential backoff between retries [sec], {backoff_factor} * 2 ** ({retry number} - 1)

    Note:
        Files are retrieved one after another and no files are saved locally.
    """

    def __init__(self, confirmed: str | Path | None = None, fatal: str | Path | None = None, lookup: str | Path | None = None,
                 timeout: float = 30.0, retries: int = 3, backoff_factor: float = 1.0) -> None:
        self._path_dict = {
            self.C: confirmed or _JHU.URL_C,
            self.F: fatal or _JHU.URL_F,
            self.N: lookup or _JHU.URL_N,
        }
        self._db = _JHU(
            timeout=Validator(timeout, "timeout").float(value_range=(0, None)),
            retries=Validator(retries, "retries").int(value_range=(0, None)),
            backoff_factor=Validator(backoff_factor, "backoff_factor").float(value_range=(0, None)),
        )

    def download(self) -> SourceTables:
        """Retrieve the three tables.

        Raises:
            DownloadError: failed in retrieving a remote file

        Returns:
            the wide table of confirmed cases, the wide table of fatal cases and the lookup table
        """
        confirmed_df = self._db.time_series(path=self._path_dict[self.C])
        fatal_df = self._db.time_series(path=self._path_dict[self.F])
        lookup_df = self._db.lookup(path=self._path_dict[self.N])
        config.info(
            f"Retrieved {len(confirmed_df)} locations of {self.C}, {len(fatal_df)} locations of {self.F}"
            f" and {len(lookup_df)} records of {self.N}")
        return SourceTables(confirmed=confirmed_df, fatal=fatal_df, lookup=lookup_df)

    def citations(self) -> list[str]:
        """Return the list of citations.
        """
        return [_JHU.CITATION]
