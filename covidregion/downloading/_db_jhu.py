#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covidregion.util.term import Term
from covidregion.downloading._db import _DataBase


class _JHU(_DataBase):
    """
    Access COVID-19 Data Repository by the Center for Systems Science and Engineering (CSSE) at Johns Hopkins University.
    https://github.com/CSSEGISandData/COVID-19
    """
    URL = "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/csse_covid_19_data"
    URL_C = f"{URL}/csse_covid_19_time_series/time_series_covid19_confirmed_global.csv"
    URL_F = f"{URL}/csse_covid_19_time_series/time_series_covid19_deaths_global.csv"
    URL_N = f"{URL}/UID_ISO_FIPS_LookUp_Table.csv"
    # Dictionary of column names
    COL_DICT = {
        # Time series
        "Province/State": Term.PROVINCE,
        "Country/Region": Term.COUNTRY,
        # UID lookup table
        "Province_State": Term.PROVINCE,
        "Country_Region": Term.COUNTRY,
    }
    # Stdout when downloading (shown at most one time)
    STDOUT = "Retrieving datasets from COVID-19 Data Repository by CSSE at Johns Hopkins University https://github.com/CSSEGISandData/COVID-19"
    # Citation
    CITATION = "Dong, E., Du, H., & Gardner, L. (2020). An interactive web-based dashboard to track COVID-19 in real time." \
        " The Lancet Infectious Diseases, 20(5), 533-534. https://doi.org/10.1016/S1473-3099(20)30120-1"

    def time_series(self, path):
        """Return a wide time-series table.

        Args:
            path (str or pathlib.Path): URL or local path of the time series

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - Province (str): province/state names or empty strings
                    - Country (str): country names
                    - Lat (float): latitude
                    - Long (float): longitude
                    - one column for each date, like 1/22/20
        """
        df = self._provide(path=path)
        return self._fill_area(df)

    def lookup(self, path):
        """Return the UID/population lookup table.

        Args:
            path (str or pathlib.Path): URL or local path of the lookup table

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Columns
                    - Admin2 (str): city/county names or empty strings
                    - Province (str): province/state names or empty strings
                    - Country (str): country names
                    - Population (pandas.Int64): population values
        """
        df = self._provide(path=path, columns=["Admin2", "Province_State", "Country_Region", "Population"])
        df = self._fill_area(df, columns=[self.ADMIN2, *self.AREA_COLUMNS])
        df[self.N] = pd.to_numeric(df[self.N], errors="coerce").astype("Int64")
        return df

    def _fill_area(self, df, columns=None):
        """Fill NA values of area columns with empty strings.
        """
        for col in columns or self.AREA_COLUMNS:
            if col in df:
                df[col] = df[col].fillna(self.UNKNOWN).astype(str)
        return df
