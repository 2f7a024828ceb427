import pandas as pd
import pytest
from covidregion import BarPlot, bar_plot, Term


@pytest.fixture(scope="module")
def population_df():
    return pd.DataFrame({Term.N: [1380004385, 220892331, 37855702]}, index=["India", "Pakistan", "Canada"], dtype="Int64")


class TestBarPlot(object):
    def test_plot(self, population_df, imgfile):
        with BarPlot(filename=imgfile) as bp:
            bp.plot(data=population_df[Term.N])
        with BarPlot(filename=imgfile) as bp:
            bp.plot(data=population_df, vertical=True)
        with BarPlot(filename=imgfile) as bp:
            bp.plot(data=population_df, vertical=False)
        with BarPlot(filename=imgfile) as bp:
            bp.plot(data=population_df, colormap="rainbow")
        with BarPlot(filename=imgfile) as bp:
            bp.plot(data=population_df, color_dict={Term.N: "blue"})

    def test_axis(self, population_df, imgfile):
        with BarPlot(filename=imgfile) as bp:
            bp.plot(data=population_df)
            bp.y_axis(y_integer=True)
        with BarPlot(filename=imgfile) as bp:
            bp.plot(data=population_df)
            bp.x_axis(xlabel=Term.COUNTRY)
            bp.y_axis(y_logscale=True)
            assert bp.ax.get_xlabel() == Term.COUNTRY

    def test_function(self, population_df, imgfile):
        bar_plot(df=population_df, title="Population", filename=imgfile, show_legend=True)
        bar_plot(df=population_df[Term.N], filename=imgfile, show_legend=False, ylabel=Term.N)
