#!/usr/bin/env python
# -*- coding: utf-8 -*-

from inspect import signature
import sys
import matplotlib
if not hasattr(sys, "ps1"):
    matplotlib.use("Agg")
from matplotlib import pyplot as plt
from matplotlib.dates import AutoDateLocator, ConciseDateFormatter
from matplotlib.ticker import ScalarFormatter, StrMethodFormatter
import pandas as pd
from covidregion.util.error import UnExecutedError
from covidregion.util.validator import Validator
from covidregion.util.term import Term

# Style of the figures
plt.style.use("fast")
plt.rcParams.update({
    "figure.figsize": (9, 6),
    "font.size": 11.0,
    "xtick.direction": "in",
    "ytick.direction": "in",
    "axes.grid": True,
    "grid.alpha": 0.3,
    "legend.frameon": False,
})


def find_args(func_list, **kwargs):
    """Select the keyword arguments accepted by the functions.

    Args:
        func_list (list[function] or function): target functions
        kwargs: keyword arguments

    Returns:
        dict[str, object]: the keyword arguments whose names are included in the parameters of the functions
    """
    funcs = func_list if isinstance(func_list, list) else [func_list]
    names = {name for func in funcs for name in signature(func).parameters} - {"self", "cls"}
    return {k: v for (k, v) in kwargs.items() if k in names}


class VisualizeBase(Term):
    """Base class of the figures, which will be saved as an image file (or shown) when exiting with-block.

    Args:
        filename (str or None): filename to save the figure or None (display)
        figsize (tuple(float, float) or None): size of the figure in inches or None (default size)
        bbox_inches (str): bounding box in inches when saving the figure
        kwargs: the other arguments of matplotlib.figure.Figure.savefig()

    Note:
        The figure is discarded without saving when an exception was raised in with-block.
    """

    def __init__(self, filename=None, figsize=None, bbox_inches="tight", **kwargs):
        self._filename = filename
        self._savefig_dict = {"bbox_inches": bbox_inches, **kwargs}
        self._fig, self._ax = plt.subplots(figsize=figsize)
        self._title = ""
        # Index and variables plotted with .plot()
        self._index = None
        self._variables = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            if exc_type is None:
                self._render()
        finally:
            plt.close(self._fig)
        return False

    def _render(self):
        if self._title:
            self._ax.set_title(self._title)
        self._fig.tight_layout()
        if self._filename is None:
            plt.show()
        else:
            self._fig.savefig(self._filename, **self._savefig_dict)

    @property
    def title(self):
        """str: title of the figure
        """
        return self._title

    @title.setter
    def title(self, title):
        self._title = "" if title is None else str(title)

    @property
    def ax(self):
        """matplotlib.axes.Axes: the main axis
        """
        return self._ax

    def plot(self, data):
        """Plot the data, defined in child classes.

        Raises:
            NotImplementedError: not implemented
        """
        raise NotImplementedError

    def _frame(self, data, columns=None):
        """Convert the data (dataframe or series) to a dataframe of numpy.float64, registering the variables.
        """
        df = pd.DataFrame(data) if isinstance(data, pd.Series) else data
        df = Validator(df, "data").dataframe(columns=columns)
        df = df.loc[:, columns or df.columns].astype("float64")
        self._index = df.index
        self._variables = df.columns.tolist()
        return df

    @staticmethod
    def _colors(variables, colormap=None, color_dict=None):
        """Return the list of colors of the variables, None means the default color cycle.

        Args:
            variables (list[str]): variable names
            colormap (str or None): name of matplotlib colormap, like "rainbow"
            color_dict (dict[str, str] or None): dictionary of variables (keys) and colors (values), prior to @colormap
        """
        if color_dict is not None:
            return [color_dict.get(variable) for variable in variables]
        if colormap is None:
            return [None for _ in variables]
        cmap = plt.get_cmap(colormap)
        return [cmap(i / max(len(variables) - 1, 1)) for i in range(len(variables))]

    def date_axis(self, xlabel=None, xlim=(None, None)):
        """Set x axis of dates with concise labels.

        Args:
            xlabel (str or None): x-label
            xlim (tuple(pandas.Timestamp or None, pandas.Timestamp or None)): limits of x domain, None means automatic
        """
        locator = AutoDateLocator()
        self._ax.xaxis.set_major_locator(locator)
        self._ax.xaxis.set_major_formatter(ConciseDateFormatter(locator))
        self._ax.set_xlabel(xlabel)
        self._ax.set_xlim(*[None if value is None else pd.Timestamp(value) for value in xlim])

    def y_axis(self, ylabel=None, y_logscale=False, ylim=(0, None), math_scale=True, y_integer=False):
        """Set y axis.

        Args:
            ylabel (str or None): y-label
            y_logscale (bool): whether use log-scale in y-axis or not
            ylim (tuple(int or float or None, int or float or None)): limits of y domain, None means automatic
            math_scale (bool): whether show the values with scientific notation or not
            y_integer (bool): whether show the values as integers or not, prior to @math_scale
        """
        self._ax.set_ylabel(ylabel)
        if y_logscale:
            self._ax.set_yscale("log")
            # Lower limit 0 is not allowed with log-scale
            ylim = (None, ylim[1]) if ylim[0] == 0 else ylim
        elif y_integer:
            self._ax.yaxis.set_major_formatter(StrMethodFormatter("{x:,.0f}"))
        elif math_scale:
            self._ax.yaxis.set_major_formatter(ScalarFormatter(useMathText=True))
            self._ax.ticklabel_format(style="sci", axis="y", scilimits=(0, 0))
        self._ax.set_ylim(*ylim)

    def _legend_handles(self):
        return self._ax.get_legend_handles_labels()

    def legend(self, bbox_to_anchor=(0.5, -0.2), bbox_loc="lower center", ncol=None, **kwargs):
        """Show legend under the plot area.

        Args:
            bbox_to_anchor (tuple(int or float, int or float)): position of the legend
            bbox_loc (str): location of the legend
            ncol (int or None): the number of columns of the legend or None (the number of variables)
            kwargs: keyword arguments of matplotlib.axes.Axes.legend()

        Raises:
            UnExecutedError: .plot() has not been called
        """
        if not self._variables:
            raise UnExecutedError(".plot()")
        handles, labels = self._legend_handles()
        ncol = Validator(ncol or len(labels), "ncol").int(value_range=(1, None))
        self._ax.legend(
            handles, labels, bbox_to_anchor=bbox_to_anchor, loc=bbox_loc, borderaxespad=0, ncol=ncol, **kwargs)

    def legend_hide(self):
        """Remove legend if exists.
        """
        if self._ax.get_legend() is not None:
            self._ax.get_legend().remove()
