#!/usr/bin/env python
# -*- coding: utf-8 -*-

from matplotlib import pyplot as plt
import pandas as pd
from covidregion.visualization.vbase import VisualizeBase, find_args


class LinePlot(VisualizeBase):
    """Line plot of time series, one line for each column.

    Args:
        filename (str or None): filename to save the figure or None (display)
        figsize (tuple(float, float) or None): size of the figure in inches or None (default size)
        bbox_inches (str): bounding box in inches when saving the figure
        kwargs: the other arguments of matplotlib.figure.Figure.savefig()
    """

    def plot(self, data, colormap=None, color_dict=None, linewidth=1.5, linestyle="-"):
        """Plot the values of the columns.

        Args:
            data (pandas.DataFrame or pandas.Series): data to show
                Index
                    x values, like dates
                Columns
                    variables to show, like country names
            colormap (str or None): name of matplotlib colormap, like "rainbow"
            color_dict (dict[str, str] or None): dictionary of column names (keys) and colors (values)
            linewidth (float): width of the lines
            linestyle (str): style of the lines

        Note:
            Columns with NaN only are shown in the legend without lines.
        """
        df = self._frame(data)
        colors = self._colors(self._variables, colormap=colormap, color_dict=color_dict)
        for (variable, color) in zip(self._variables, colors):
            self._ax.plot(df.index, df[variable], label=variable, color=color, linewidth=linewidth, linestyle=linestyle)

    def x_axis(self, xlabel=None, xlim=(None, None)):
        """Set x axis, with concise date labels when the index is dates.

        Args:
            xlabel (str or None): x-label
            xlim (tuple(object, object)): limits of x domain, None means automatic
        """
        if isinstance(self._index, pd.DatetimeIndex):
            self.date_axis(xlabel=xlabel, xlim=xlim)
            return
        self._ax.set_xlabel(xlabel)
        self._ax.set_xlim(*xlim)


def line_plot(df, title=None, filename=None, show_legend=True, **kwargs):
    """Wrapper function: show chronological change of the data.

    Args:
        df (pandas.DataFrame or pandas.Series): data to show
            Index
                Date (pandas.Timestamp)
            Columns
                variables to show, like country names
        title (str or None): title of the figure
        filename (str or None): filename to save the figure or None (display)
        show_legend (bool): whether show legend or not
        kwargs: keyword arguments of the following classes and methods.
            - covidregion.LinePlot() and its methods,
            - matplotlib.figure.Figure.savefig(), matplotlib.axes.Axes.legend()
    """
    with LinePlot(filename=filename, **find_args([LinePlot.__init__, plt.Figure.savefig], **kwargs)) as lp:
        lp.title = title
        lp.plot(data=df, **find_args([LinePlot.plot], **kwargs))
        lp.x_axis(**find_args([LinePlot.x_axis], **kwargs))
        lp.y_axis(**find_args([LinePlot.y_axis], **kwargs))
        if show_legend:
            lp.legend(**find_args([LinePlot.legend], **kwargs))
        else:
            lp.legend_hide()
