# flake8: noqa

# version
from covidregion.__version__ import __version__
from covidregion.__citation__ import __citation__
# util
from covidregion.util.config import config
from covidregion.util.error import NotIncludedError, NotEnoughDataError, UnExecutedError
from covidregion.util.error import UnExpectedTypeError, UnExpectedNoneError, EmptyError
from covidregion.util.error import UnExpectedValueRangeError, UnExpectedValueError
from covidregion.util.error import DateFormatError, DuplicatedKeyError, SubsetNotFoundError, DownloadError
from covidregion.util.filer import Filer
from covidregion.util.validator import Validator
from covidregion.util.term import Term, TargetCountry, TARGET_COUNTRIES, SELECTED_COUNTRIES, FATAL_SCALE
# visualization
from covidregion.visualization.vbase import VisualizeBase
from covidregion.visualization.line_plot import LinePlot, line_plot
from covidregion.visualization.bar_plot import BarPlot, bar_plot
from covidregion.visualization.dual_axis_plot import DualAxisPlot, dual_axis_plot
# downloading
from covidregion.downloading.downloader import DataDownloader, SourceTables
# engineering
from covidregion.engineering.reshape import reshape_wide
from covidregion.engineering.merge import merge_records, attach_population, combined_key
from covidregion.engineering.subset import filter_positive, filter_countries, per_capita, country_level
from covidregion.engineering.engineer import DataEngineer
# trend
from covidregion.trend.smoother import TrendSmoother
# regression
from covidregion.regression.ols import LinearRegressor, RegressionResult
# analysis
from covidregion.analysis.report import RegionalReport


def get_version():
    """
    Return the version number, like covidregion v0.0.0

    Returns:
        str
    """
    return f"covidregion v{__version__}"


def get_citation():
    """
    Return the citation of covidregion

    Returns:
        str
    """
    return __citation__
