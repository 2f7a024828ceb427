import warnings

warnings.simplefilter("ignore", FutureWarning)
import pandas as pd
import pytest
from covidregion import DataEngineer, Term

DATE_LABELS = [f"1/{day}/20" for day in range(22, 32)]


@pytest.fixture(scope="function")
def imgfile(tmp_path):
    filepath = tmp_path.joinpath("test.jpg")
    yield str(filepath)
    filepath.unlink(missing_ok=True)


def _wide(records):
    rows = [
        {Term.PROVINCE: province, Term.COUNTRY: country, Term.LAT: 0.0, Term.LON: 0.0, **dict(zip(DATE_LABELS, values))}
        for (province, country, values) in records
    ]
    return pd.DataFrame(rows, columns=[*Term.WIDE_COLUMNS, *DATE_LABELS])


@pytest.fixture(scope="function")
def confirmed_wide():
    return _wide([
        ("", "India", [0, 0, 1, 3, 5, 8, 12, 20, 30, 45]),
        ("", "Pakistan", [0, 0, 0, 2, 4, 7, 9, 15, 22, 31]),
        ("Ontario", "Canada", [0, 1, 1, 2, 3, 5, 8, 10, 13, 20]),
        ("Quebec", "Canada", [0, 0, 0, 0, 1, 1, 2, 3, 3, 4]),
        ("", "Nepal", [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]),
    ])


@pytest.fixture(scope="function")
def fatal_wide():
    return _wide([
        ("", "India", [0, 0, 0, 0, 0, 1, 1, 2, 3, 4]),
        ("", "Pakistan", [0, 0, 0, 0, 0, 0, 1, 1, 2, 3]),
        ("Ontario", "Canada", [0, 0, 0, 0, 0, 0, 0, 0, 0, 1]),
        ("Quebec", "Canada", [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]),
        ("", "Nepal", [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]),
    ])


@pytest.fixture(scope="function")
def lookup_df():
    return pd.DataFrame(
        [
            ["", "", "India", 1380004385],
            ["", "", "Pakistan", 220892331],
            ["", "Ontario", "Canada", 14826276],
            ["", "Quebec", "Canada", 8604495],
            ["", "", "Canada", 37855702],
            ["", "", "Nepal", 29136808],
            ["Autauga", "Alabama", "US", 55869],
            ["", "Alabama", "US", 4903185],
        ],
        columns=[Term.ADMIN2, Term.PROVINCE, Term.COUNTRY, Term.N],
    ).astype({Term.N: "Int64"})


@pytest.fixture(scope="function")
def testland():
    """Cases/deaths in Testland on 01Jan2021 and 02Jan2021 with 1000 population.
    """
    columns = [*Term.WIDE_COLUMNS, "1/1/21", "1/2/21"]
    confirmed = pd.DataFrame([["", "Testland", 0.0, 0.0, 0, 5]], columns=columns)
    fatal = pd.DataFrame([["", "Testland", 0.0, 0.0, 0, 1]], columns=columns)
    lookup = pd.DataFrame([["", "Testland", 1000]], columns=[Term.PROVINCE, Term.COUNTRY, Term.N])
    return confirmed, fatal, lookup


@pytest.fixture(scope="function")
def records(confirmed_wide, fatal_wide, lookup_df):
    engineer = DataEngineer(countries=["India", "Pakistan", "Canada"])
    return engineer.register(confirmed_wide, fatal_wide, lookup_df).reshape().merge().filter().all()
