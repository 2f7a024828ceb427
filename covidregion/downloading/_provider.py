import io
from pathlib import Path
from urllib.parse import urlparse
import pandas as pd
from urllib3 import PoolManager, Retry, Timeout
from urllib3.exceptions import HTTPError
from covidregion.util.config import config
from covidregion.util.error import DownloadError
from covidregion.util.term import Term


class _DataProvider(Term):
    """Retrieve CSV files from remote servers (or local paths) as dataframes.

    Args:
        timeout (float): timeout of connection and reading [sec]
        retries (int): the number of retries when connection failed or the server returned 429/5xx
        backoff_factor (float): factor of exponential backoff between retries [sec]
        stdout (str or None): message shown at INFO level before downloading
    """
    RETRY_STATUS = (429, 500, 502, 503, 504)

    def __init__(self, timeout, retries, backoff_factor, stdout=None):
        self._timeout = Timeout(connect=timeout, read=timeout)
        self._retry = Retry(
            total=retries, backoff_factor=backoff_factor, status_forcelist=self.RETRY_STATUS,
            allowed_methods=frozenset(["GET"]), raise_on_status=False)
        self._stdout = stdout

    def fetch(self, url):
        """Retrieve the content of the remote file with HTTP GET.

        Args:
            url (str): URL of the file

        Raises:
            DownloadError: connection failed after retries or HTTP status code >= 400 was returned

        Returns:
            bytes: the content
        """
        config.debug(f"GET {url}")
        with PoolManager(headers={"User-Agent": "Mozilla/5.0"}) as http:
            try:
                r = http.request("GET", url, timeout=self._timeout, retries=self._retry)
            except HTTPError as e:
                raise DownloadError(url=url, reason=e) from e
        if r.status >= 400:
            raise DownloadError(url=url, reason=f"HTTP status code {r.status}")
        return r.data

    def read_csv(self, path, columns=None):
        """Read the CSV file and return as a dataframe.

        Args:
            path (str or pathlib.Path): URL or local path of the file
            columns (list[str] or None): column names to use or None (all columns)

        Raises:
            DownloadError: failed in retrieving the remote file

        Returns:
            pandas.DataFrame: the data
        """
        kwargs = {"header": 0, "usecols": columns, "encoding": "utf-8"}
        if isinstance(path, Path) or urlparse(str(path)).scheme not in ("http", "https"):
            config.debug(f"Reading {path}")
            return pd.read_csv(path, **kwargs)
        if self._stdout is not None:
            config.info(self._stdout)
            self._stdout = None
        config.info(f"Retrieving {Path(urlparse(path).path).name}")
        return pd.read_csv(io.BytesIO(self.fetch(url=path)), **kwargs)
