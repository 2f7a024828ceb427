import pandas as pd
import pytest
from covidregion import DualAxisPlot, dual_axis_plot, Term, UnExecutedError, UnExpectedValueRangeError, FATAL_SCALE


@pytest.fixture(scope="module")
def cases_df():
    dates = pd.date_range("2020-01-22", periods=5, freq="D")
    return pd.DataFrame({Term.C: [1, 10, 100, 200, 400], Term.F: [0, 1, 2, 5, 20]}, index=dates, dtype="Int64")


class TestDualAxisPlot(object):
    def test_plot(self, cases_df, imgfile):
        with DualAxisPlot(filename=imgfile) as dp:
            dp.plot(data=cases_df, left=Term.C, right=Term.F)
            left_top = dp.ax.get_ylim()[1]
            right_top = dp.ax_right.get_ylim()[1]
            assert dp.ax.get_ylim()[0] == 0
            assert dp.ax_right.get_ylim()[0] == 0
            assert right_top == pytest.approx(left_top * FATAL_SCALE)
            # Fatal is dominant: 20 / 0.025 = 800 > 400
            assert left_top == pytest.approx(800 * 1.05)
            dp.x_axis(xlabel=Term.DATE)
            dp.legend()
            assert len(dp.ax.get_legend().get_texts()) == 2

    def test_scale(self, cases_df, imgfile):
        with DualAxisPlot(filename=imgfile, scale=0.1) as dp:
            dp.plot(data=cases_df, left=Term.C, right=Term.F)
            assert dp.ax.get_ylim()[1] == pytest.approx(400 * 1.05)
            assert dp.ax_right.get_ylim()[1] == pytest.approx(400 * 1.05 * 0.1)
        with pytest.raises(UnExpectedValueRangeError):
            DualAxisPlot(filename=imgfile, scale=0)
        with pytest.raises(UnExpectedValueRangeError):
            DualAxisPlot(filename=imgfile, scale=-1)
        with pytest.raises(UnExpectedValueRangeError):
            dual_axis_plot(df=cases_df, left=Term.C, right=Term.F, filename=imgfile, scale=0.0)

    def test_zero(self, cases_df, imgfile):
        with DualAxisPlot(filename=imgfile) as dp:
            dp.plot(data=cases_df * 0, left=Term.C, right=Term.F)
            assert dp.ax.get_ylim() == (0, 1.0)

    def test_legend(self, cases_df, imgfile):
        with pytest.raises(UnExecutedError):
            with DualAxisPlot(filename=imgfile) as dp:
                dp.legend()

    def test_function(self, cases_df, imgfile):
        dual_axis_plot(df=cases_df, left=Term.C, right=Term.F, title="India", filename=imgfile)
        dual_axis_plot(df=cases_df, left=Term.C, right=Term.F, filename=imgfile, scale=0.05, xlabel=None)
