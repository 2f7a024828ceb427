#!/usr/bin/env python
# -*- coding: utf-8 -*-

from matplotlib import pyplot as plt
import numpy as np
from covidregion.util.validator import Validator
from covidregion.util.term import FATAL_SCALE
from covidregion.visualization.vbase import VisualizeBase, find_args


class DualAxisPlot(VisualizeBase):
    """Line plot of two variables with two y axes, whose limits are tied with a fixed ratio.

    Args:
        filename (str or None): filename to save the figure or None (display)
        scale (float): ratio of the right axis to the left axis, must be positive
        figsize (tuple(float, float) or None): size of the figure in inches or None (default size)
        bbox_inches (str): bounding box in inches when saving the figure
        kwargs: the other arguments of matplotlib.figure.Figure.savefig()

    Raises:
        UnExpectedValueRangeError: @scale is not a positive value

    Note:
        With the default @scale (covidregion.FATAL_SCALE), the right axis shows 0.025 times the values of the left axis.
        This ratio is only for visual comparison of the curves and does not mean case fatality ratio.
    """
    MIN_SCALE = 1e-10

    def __init__(self, filename=None, scale=FATAL_SCALE, figsize=None, bbox_inches="tight", **kwargs):
        self._scale = Validator(scale, "scale").float(value_range=(self.MIN_SCALE, None))
        super().__init__(filename=filename, figsize=figsize, bbox_inches=bbox_inches, **kwargs)
        self._ax_right = self._ax.twinx()
        self._ax_right.grid(False)

    @property
    def ax_right(self):
        """matplotlib.axes.Axes: the axis of the right y axis
        """
        return self._ax_right

    def plot(self, data, left, right, left_color="tab:blue", right_color="tab:red"):
        """Plot chronological change of the two variables.

        Args:
            data (pandas.DataFrame): data to show
                Index
                    x values, like dates
                Columns
                    variables including @left and @right
            left (str): column name of the variable shown with the left axis
            right (str): column name of the variable shown with the right axis
            left_color (str): color of the left variable
            right_color (str): color of the right variable

        Note:
            The upper limit of the left axis covers both of the lines after scaling the right variable.
        """
        df = self._frame(data, columns=[left, right])
        self._ax.plot(df.index, df[left], color=left_color, label=left)
        self._ax_right.plot(df.index, df[right], color=right_color, label=right)
        top = np.nanmax([df[left].max(), df[right].max() / self._scale, 0])
        top = 1.0 if top == 0 else top * 1.05
        self._ax.set_ylim(0, top)
        self._ax_right.set_ylim(0, top * self._scale)
        self._ax.set_ylabel(left, color=left_color)
        self._ax_right.set_ylabel(right, color=right_color)

    def x_axis(self, xlabel=None):
        """Set x axis of dates.

        Args:
            xlabel (str or None): x-label
        """
        self.date_axis(xlabel=xlabel)

    def _legend_handles(self):
        left_handles, left_labels = self._ax.get_legend_handles_labels()
        right_handles, right_labels = self._ax_right.get_legend_handles_labels()
        return left_handles + right_handles, left_labels + right_labels


def dual_axis_plot(df, left, right, title=None, filename=None, scale=FATAL_SCALE, **kwargs):
    """Wrapper function: show chronological change of two variables with two y axes.

    Args:
        df (pandas.DataFrame): data to show
            Index
                Date (pandas.Timestamp)
            Columns
                variables including @left and @right
        left (str): column name of the variable shown with the left axis
        right (str): column name of the variable shown with the right axis
        title (str or None): title of the figure
        filename (str or None): filename to save the figure or None (display)
        scale (float): ratio of the right axis to the left axis
        kwargs: keyword arguments of the following classes and methods.
            - covidregion.DualAxisPlot() and its methods,
            - matplotlib.figure.Figure.savefig(), matplotlib.axes.Axes.legend()
    """
    with DualAxisPlot(filename=filename, scale=scale, **find_args([DualAxisPlot.__init__, plt.Figure.savefig], **kwargs)) as dp:
        dp.title = title
        dp.plot(data=df, left=left, right=right, **find_args([DualAxisPlot.plot], **kwargs))
        dp.x_axis(**find_args([DualAxisPlot.x_axis], **kwargs))
        dp.legend(**find_args([DualAxisPlot.legend], **kwargs))
