from covidregion.__version__ import __version__

__citation__ = "covidregion Development Team, " \
    f"covidregion version {__version__}: " \
    "Python library for exploratory analysis of regional COVID-19 cases and deaths"
