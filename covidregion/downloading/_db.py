#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covidregion.util.term import Term
from covidregion.downloading._provider import _DataProvider


class _DataBase(Term):
    """Basic class for databases.

    Args:
        timeout (float): timeout of connection and reading [sec]
        retries (int): the number of retries of each download
        backoff_factor (float): factor of exponential backoff between retries [sec]
    """
    # Dictionary of column names
    COL_DICT = {}
    # Stdout when downloading (shown at most one time)
    STDOUT = None
    # Citation
    CITATION = ""

    def __init__(self, timeout, retries, backoff_factor):
        self._provider = _DataProvider(
            timeout=timeout, retries=retries, backoff_factor=backoff_factor, stdout=self.STDOUT)

    def _provide(self, path, columns=None):
        """Provide the data, renaming columns with class variable .COL_DICT.

        Args:
            path (str or pathlib.Path): URL or local path of the data
            columns (list[str] or None): columns to use or None (all columns)

        Returns:
            pandas.DataFrame
        """
        df = self._provider.read_csv(path=path, columns=columns)
        return df.rename(columns=self.COL_DICT)
