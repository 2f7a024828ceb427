#!/usr/bin/env python
# -*- coding: utf-8 -*-

from matplotlib import pyplot as plt
import numpy as np
from covidregion.visualization.vbase import VisualizeBase, find_args


class BarPlot(VisualizeBase):
    """Bar plot of categories, like countries.

    Args:
        filename (str or None): filename to save the figure or None (display)
        figsize (tuple(float, float) or None): size of the figure in inches or None (default size)
        bbox_inches (str): bounding box in inches when saving the figure
        kwargs: the other arguments of matplotlib.figure.Figure.savefig()
    """

    def plot(self, data, vertical=True, colormap=None, color_dict=None, width=0.8):
        """Plot the values with bars, grouped by the index.

        Args:
            data (pandas.DataFrame or pandas.Series): data to show
                Index
                    labels of the bars, like country names
                Columns
                    variables to show, one bar in a group for each column
            vertical (bool): whether vertical bars (True) or horizontal bars (False)
            colormap (str or None): name of matplotlib colormap, like "rainbow"
            color_dict (dict[str, str] or None): dictionary of column names (keys) and colors (values)
            width (float): total width of the bars in a group

        Note:
            NA values are shown as empty spaces.
        """
        df = self._frame(data)
        colors = self._colors(self._variables, colormap=colormap, color_dict=color_dict)
        positions = np.arange(len(df))
        bar_width = width / len(self._variables)
        for (i, (variable, color)) in enumerate(zip(self._variables, colors)):
            shifted = positions - width / 2 + bar_width * (i + 0.5)
            if vertical:
                self._ax.bar(shifted, df[variable], width=bar_width, color=color, label=variable)
            else:
                self._ax.barh(shifted, df[variable], height=bar_width, color=color, label=variable)
        labels = [str(label) for label in df.index]
        if vertical:
            self._ax.set_xticks(positions, labels)
        else:
            self._ax.set_yticks(positions, labels)

    def x_axis(self, xlabel=None):
        """Set x axis.

        Args:
            xlabel (str or None): x-label
        """
        self._ax.set_xlabel(xlabel)


def bar_plot(df, title=None, filename=None, show_legend=True, **kwargs):
    """Wrapper function: show the values of the categories with bars.

    Args:
        df (pandas.DataFrame or pandas.Series): data to show
            Index
                labels of the bars, like country names
            Columns
                variables to show
        title (str or None): title of the figure
        filename (str or None): filename to save the figure or None (display)
        show_legend (bool): whether show legend or not
        kwargs: keyword arguments of the following classes and methods.
            - covidregion.BarPlot() and its methods,
            - matplotlib.figure.Figure.savefig(), matplotlib.axes.Axes.legend()
    """
    with BarPlot(filename=filename, **find_args([BarPlot.__init__, plt.Figure.savefig], **kwargs)) as bp:
        bp.title = title
        bp.plot(data=df, **find_args([BarPlot.plot], **kwargs))
        bp.x_axis(**find_args([BarPlot.x_axis], **kwargs))
        bp.y_axis(**find_args([BarPlot.y_axis], **kwargs))
        if show_legend:
            bp.legend(**find_args([BarPlot.legend], **kwargs))
        else:
            bp.legend_hide()
