#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covidregion.util.config import config
from covidregion.util.validator import Validator
from covidregion.util.term import Term, TARGET_COUNTRIES


def filter_positive(data):
    """Select records with positive number of confirmed cases.

    Args:
        data (pandas.DataFrame): records with Confirmed column

    Returns:
        pandas.DataFrame: selected records with reset index

    Note:
        Records with NA as the number of confirmed cases will be removed.
    """
    df = Validator(data, "data").dataframe(columns=[Term.C])
    selected = (df[Term.C].fillna(0) > 0).to_numpy(dtype=bool)
    config.debug(f"{len(df) - selected.sum()} records without positive {Term.C} values were removed")
    return df.loc[selected].reset_index(drop=True)


def filter_countries(data, countries=None):
    """Select records of the countries.

    Args:
        data (pandas.DataFrame): records with Country column
        countries (list[str] or tuple(str) or None): country names (exact and case-sensitive) or None (TARGET_COUNTRIES)

    Returns:
        pandas.DataFrame: selected records with reset index
    """
    df = Validator(data, "data").dataframe(columns=[Term.COUNTRY])
    names = [getattr(name, "value", name) for name in Validator(countries, "countries").sequence(default=TARGET_COUNTRIES)]
    selected = df[Term.COUNTRY].isin(names).to_numpy(dtype=bool)
    missing = sorted(set(names) - set(df.loc[selected, Term.COUNTRY]))
    if missing:
        config.warning(f"No records were found for {', '.join(missing)}")
    return df.loc[selected].reset_index(drop=True)


def per_capita(data):
    """Return the number of confirmed cases divided by population values.

    Args:
        data (pandas.DataFrame): records with Confirmed and Population columns

    Returns:
        pandas.Series: values (numpy.float64) named Confirmed_per_capita, NaN when population is NA or 0

    Note:
        Values are not rounded.
    """
    df = Validator(data, "data").dataframe(columns=[Term.C, Term.N])
    confirmed = df[Term.C].astype("float64")
    population = df[Term.N].astype("float64")
    return (confirmed / population.where(population > 0)).rename(Term.C_PC)


def country_level(data):
    """Sum up the records of provinces with country names and dates.

    Args:
        data (pandas.DataFrame): records with Province/Country/Date/Confirmed/Fatal/Population columns

    Returns:
        pandas.DataFrame:
            Index
                reset index
            Columns
                - Country (str): country names
                - Date (pandas.Timestamp): observation dates
                - Confirmed (pandas.Int64): the number of confirmed cases
                - Fatal (pandas.Int64): the number of fatal cases
                - Population (pandas.Int64): population values, constant for each country
                - Confirmed_per_capita (numpy.float64): the number of confirmed cases per capita

    Note:
        Totals of Confirmed/Fatal are NA when all values of the provinces are NA.
        Population of a country is the total of the provinces included in the records at any date,
        and NA when the population of at least one of the provinces is NA.
    """
    values = [Term.C, Term.F]
    df = Validator(data, "data").dataframe(columns=[*Term.AREA_COLUMNS, Term.DATE, *values, Term.N])
    df[[*values, Term.N]] = df[[*values, Term.N]].astype("Int64")
    area_df = df.drop_duplicates(subset=Term.AREA_COLUMNS)
    population = area_df.groupby(Term.COUNTRY)[Term.N].agg(lambda x: x.sum() if x.notna().all() else pd.NA)
    df = df.groupby([Term.COUNTRY, Term.DATE], as_index=False)[values].sum(min_count=1)
    df[values] = df[values].astype("Int64")
    df[Term.N] = df[Term.COUNTRY].map(population).astype("Int64")
    df[Term.C_PC] = per_capita(df)
    return df.sort_values([Term.COUNTRY, Term.DATE], ignore_index=True)
