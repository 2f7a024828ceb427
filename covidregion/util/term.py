from __future__ import annotations
from enum import Enum


class TargetCountry(str, Enum):
    """Countries analyzed by default, spelled as in the JHU CSSE time series.
    """
    AFGHANISTAN = "Afghanistan"
    BANGLADESH = "Bangladesh"
    BHUTAN = "Bhutan"
    INDIA = "India"
    NEPAL = "Nepal"
    PAKISTAN = "Pakistan"
    SRI_LANKA = "Sri Lanka"


# Allow-list of countries, exact and case-sensitive
TARGET_COUNTRIES: tuple[str, ...] = tuple(country.value for country in TargetCountry)
# Countries for dual-axis charts and regression
SELECTED_COUNTRIES: tuple[str, ...] = (TargetCountry.INDIA.value, TargetCountry.PAKISTAN.value)
# Ratio between the left (Confirmed) and right (Fatal) axis of dual-axis charts.
# This is an arbitrary factor for visual comparison and not a case-fatality ratio.
FATAL_SCALE: float = 0.025


class Term(object):
    """
    Term definition.
    """
    # Variables
    N: str = "Population"
    C: str = "Confirmed"
    F: str = "Fatal"
    C_PC: str = "Confirmed_per_capita"
    # Column names
    DATE: str = "Date"
    COUNTRY: str = "Country"
    PROVINCE: str = "Province"
    KEY: str = "Combined_Key"
    ADMIN2: str = "Admin2"
    LAT: str = "Lat"
    LON: str = "Long"
    AREA_COLUMNS: list[str] = [PROVINCE, COUNTRY]
    ID_COLUMNS: list[str] = [PROVINCE, COUNTRY, DATE]
    WIDE_COLUMNS: list[str] = [PROVINCE, COUNTRY, LAT, LON]
    VALUE_COLUMNS: list[str] = [C, F]
    COLUMNS: list[str] = [*ID_COLUMNS, KEY, C, F, N]
    # Date format of the column labels in wide tables: 1/22/20 etc.
    WIDE_DATE_FORMAT: str = "%m/%d/%y"
    # Separator of province and country in combined keys
    SEP: str = ", "
    # Empty province/state names
    UNKNOWN: str = ""
