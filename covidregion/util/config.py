#!/usr/bin/env python
# -*- coding: utf-8 -*-

from contextlib import contextmanager
import sys
import time
import warnings
from loguru import logger as loguru_logger


class _Config(object):
    """Logging settings shared by the stages of covidregion (downloading, engineering, analysis).

    Note:
        Messages are handled by loguru. The default sink is stdout with INFO level.
    """
    # Verbosity (int) and loguru level names
    _LEVELS = ("ERROR", "WARNING", "INFO", "DEBUG")
    _FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

    def __init__(self):
        self._logger = loguru_logger
        self._verbosity = 2

    @property
    def logger_level(self):
        """int: verbosity of the logger, 0 (ERROR) to 3 (DEBUG)
        """
        return self._verbosity

    def logger(self, level, sink=None):
        """Replace the sink of the logger.

        Args:
            level (int): verbosity, 0 (ERROR), 1 (WARNING), 2 (INFO) or 3 (DEBUG)
            sink (object or None): loguru sink, like a file path or a callable, or None (stdout)

        Raises:
            ValueError: @level is not in 0-3
        """
        if level not in range(len(self._LEVELS)):
            raise ValueError(f"@level must be an integer in 0-{len(self._LEVELS) - 1}, but {level} was applied.")
        self._logger.remove()
        self._logger.add(sys.__stdout__ if sink is None else sink, level=self._LEVELS[level], format=self._FORMAT)
        self._verbosity = level

    @contextmanager
    def stage(self, name):
        """Log the start and the end of a processing stage with elapsed time at DEBUG level.

        Args:
            name (str): name of the stage, like "reshape"
        """
        self._logger.debug(f"{name}: started")
        start = time.perf_counter()
        yield
        self._logger.debug(f"{name}: completed in {time.perf_counter() - start:.2f} sec")

    def error(self, message):
        self._logger.error(message)

    def warning(self, message, category=None):
        """Log the message at WARNING level and issue Python warning only when @category is not None.

        Args:
            message (str): message to show
            category (Warning or None): category of the Python warning
        """
        self._logger.warning(message)
        if category is not None:
            warnings.warn(message, category, stacklevel=2)

    def info(self, message):
        self._logger.info(message)

    def debug(self, message):
        self._logger.debug(message)


config = _Config()
config.logger(level=2)
