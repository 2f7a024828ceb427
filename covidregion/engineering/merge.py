#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covidregion.util.config import config
from covidregion.util.error import DuplicatedKeyError
from covidregion.util.validator import Validator
from covidregion.util.term import Term


def merge_records(confirmed, fatal):
    """Combine the long tables of confirmed cases and fatal cases with full outer join.

    Args:
        confirmed (pandas.DataFrame): long table of confirmed cases
            Index
                reset index
            Columns
                - Province (str): province/state names or empty strings
                - Country (str): country names
                - Date (pandas.Timestamp): observation dates
                - Confirmed (pandas.Int64): the number of confirmed cases
        fatal (pandas.DataFrame): long table of fatal cases with Province/Country/Date/Fatal columns

    Raises:
        NotIncludedError: expected columns were not included
        DuplicatedKeyError: combinations of Province/Country/Date were duplicated in the tables

    Returns:
        pandas.DataFrame:
            Index
                reset index
            Columns
                - Province (str): province/state names or empty strings
                - Country (str): country names
                - Date (pandas.Timestamp): observation dates
                - Confirmed (pandas.Int64): the number of confirmed cases, NA when the records are only in @fatal
                - Fatal (pandas.Int64): the number of fatal cases, NA when the records are only in @confirmed
    """
    c_df = Validator(confirmed, "confirmed").dataframe(columns=[*Term.ID_COLUMNS, Term.C])
    f_df = Validator(fatal, "fatal").dataframe(columns=[*Term.ID_COLUMNS, Term.F])
    c_df = Validator(c_df.loc[:, [*Term.ID_COLUMNS, Term.C]], "confirmed").unique(columns=Term.ID_COLUMNS)
    f_df = Validator(f_df.loc[:, [*Term.ID_COLUMNS, Term.F]], "fatal").unique(columns=Term.ID_COLUMNS)
    df = c_df.merge(f_df, how="outer", on=Term.ID_COLUMNS, validate="one_to_one")
    df[Term.VALUE_COLUMNS] = df[Term.VALUE_COLUMNS].astype("Int64")
    config.debug(f"{len(c_df)} records of {Term.C} and {len(f_df)} records of {Term.F} were merged to {len(df)} records")
    return df.sort_values([Term.COUNTRY, Term.PROVINCE, Term.DATE], ignore_index=True)


def attach_population(records, lookup, duplicates="first"):
    """Add population values to the records with left join on Province/Country.

    Args:
        records (pandas.DataFrame): records with Province/Country columns
        lookup (pandas.DataFrame): location/population lookup table
            Index
                reset index
            Columns
                - Province (str): province/state names or empty strings
                - Country (str): country names
                - Population (pandas.Int64): population values
                - Admin2 (str): city/county names or empty strings, optional
        duplicates (str): "first" or "raise", how to handle locations with multiple population values

    Raises:
        NotIncludedError: expected columns were not included
        UnExpectedValueError: @duplicates is not "first" nor "raise"
        DuplicatedKeyError: @duplicates is "raise" and multiple population values were found for a location

    Returns:
        pandas.DataFrame: @records with Population (pandas.Int64) column, NA when not found in @lookup

    Note:
        Records in @lookup with empty Admin2 (province/country level) are preferred to the others (city level).
        When a location still has multiple candidates, the first record in @lookup is used with @duplicates="first".
    """
    Validator([duplicates], "duplicates").sequence(candidates=["first", "raise"])
    df = Validator(records, "records").dataframe(columns=Term.AREA_COLUMNS)
    df[Term.PROVINCE] = df[Term.PROVINCE].fillna(Term.UNKNOWN)
    n_df = Validator(lookup, "lookup").dataframe(columns=[*Term.AREA_COLUMNS, Term.N])
    n_df[Term.PROVINCE] = n_df[Term.PROVINCE].fillna(Term.UNKNOWN)
    # Prefer province/country level records
    if Term.ADMIN2 in n_df:
        n_df["_city"] = n_df[Term.ADMIN2].fillna(Term.UNKNOWN).ne(Term.UNKNOWN)
        n_df = n_df.loc[n_df["_city"] == n_df.groupby(Term.AREA_COLUMNS)["_city"].transform("min")]
    n_df = n_df.loc[:, [*Term.AREA_COLUMNS, Term.N]]
    series = n_df.duplicated(subset=Term.AREA_COLUMNS, keep=False)
    if series.any():
        dup_df = n_df.loc[series, Term.AREA_COLUMNS].drop_duplicates()
        if duplicates == "raise":
            raise DuplicatedKeyError("lookup", Term.AREA_COLUMNS, dup_df)
        config.warning(f"{len(dup_df)} location(s) have multiple {Term.N} values in the lookup table. The first values were used.")
        n_df = n_df.drop_duplicates(subset=Term.AREA_COLUMNS, keep="first")
    df = df.drop(columns=Term.N, errors="ignore").merge(n_df, how="left", on=Term.AREA_COLUMNS, validate="many_to_one")
    df[Term.N] = df[Term.N].astype("Int64")
    not_found = df.loc[df[Term.N].isna(), Term.AREA_COLUMNS].drop_duplicates()
    if not not_found.empty:
        config.debug(f"{Term.N} values of {len(not_found)} location(s) were not found")
    return df


def combined_key(data):
    """Return display keys of the locations, like "Ontario, Canada" and "India".

    Args:
        data (pandas.DataFrame): records with Province/Country columns

    Returns:
        pandas.Series: "{Province}, {Country}" or Country when Province is empty, named Combined_Key
    """
    df = Validator(data, "data").dataframe(columns=Term.AREA_COLUMNS)
    province = df[Term.PROVINCE].fillna(Term.UNKNOWN).astype(str)
    country = df[Term.COUNTRY].astype(str)
    return country.where(province.eq(Term.UNKNOWN), province + Term.SEP + country).rename(Term.KEY)
