#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covidregion.util.config import config
from covidregion.util.error import DateFormatError, DuplicatedKeyError, EmptyError, UnExpectedTypeError
from covidregion.util.validator import Validator
from covidregion.util.term import Term


def reshape_wide(data, value, date_format=Term.WIDE_DATE_FORMAT):
    """Convert a wide time-series table (one column for each date) to a long table (one row for each date).

    Args:
        data (pandas.DataFrame): wide table
            Index
                reset index
            Columns
                - Province (str): province/state names or empty strings
                - Country (str): country names
                - Lat (float): latitude, will be discarded
                - Long (float): longitude, will be discarded
                - one column for each date, like 1/22/20
        value (str): column name of the values in the output, like Confirmed
        date_format (str): format of the column labels of dates

    Raises:
        NotIncludedError: an identity column was not included
        EmptyError: no date columns were included
        DuplicatedKeyError: combinations of Province/Country or dates were duplicated
        DateFormatError: some column labels could not be parsed as dates with @date_format
        UnExpectedTypeError: values could not be converted to integers

    Returns:
        pandas.DataFrame:
            Index
                reset index
            Columns
                - Province (str): province/state names or empty strings
                - Country (str): country names
                - Date (pandas.Timestamp): observation dates
                - (pandas.Int64): values with the column name @value

    Note:
        The number of rows is the number of the locations multiplied by the number of the dates.
    """
    df = Validator(data, "data").dataframe(columns=Term.WIDE_COLUMNS)
    df[Term.PROVINCE] = df[Term.PROVINCE].fillna(Term.UNKNOWN)
    df = Validator(df, "data").unique(columns=Term.AREA_COLUMNS)
    labels = [col for col in df.columns if col not in Term.WIDE_COLUMNS]
    if not labels:
        raise EmptyError(name="date columns of data", details=f"Columns other than {', '.join(Term.WIDE_COLUMNS)} are required")
    dates = pd.to_datetime(pd.Series(labels, dtype="object").astype(str), format=date_format, errors="coerce")
    failed = [label for (label, date) in zip(labels, dates) if pd.isna(date)]
    if failed:
        raise DateFormatError(name="column labels of data", values=failed, date_format=date_format)
    if dates.duplicated().any():
        dup_df = pd.DataFrame({Term.DATE: dates[dates.duplicated(keep=False)]}).drop_duplicates()
        raise DuplicatedKeyError("date columns of data", [Term.DATE], dup_df)
    date_dict = dict(zip(labels, dates))
    df = df.drop(columns=[Term.LAT, Term.LON], errors="ignore").melt(
        id_vars=Term.AREA_COLUMNS, value_vars=labels, var_name=Term.DATE, value_name=value)
    df[Term.DATE] = df[Term.DATE].map(date_dict)
    try:
        df[value] = pd.to_numeric(df[value]).astype("Int64")
    except (ValueError, TypeError):
        raise UnExpectedTypeError(f"values of {value}", df[value], int) from None
    config.debug(f"{value}: {len(data)} locations x {len(labels)} dates were converted to {len(df)} records")
    return df.sort_values([Term.COUNTRY, Term.PROVINCE, Term.DATE], ignore_index=True)
