#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covidregion.util.error import NotIncludedError, UnExpectedTypeError, EmptyError, UnExpectedNoneError
from covidregion.util.error import UnExpectedValueRangeError, UnExpectedValueError, DuplicatedKeyError


class Validator(object):
    """Validate arguments and tables before processing the records.

    Args:
        target (object): target object to validate
        name (str): name of the target shown in error messages
        accept_none (bool): whether accept None as the target value or not

    Raises:
        UnExpectedNoneError: @accept_none is False, but @target is None

    Note:
        When @target is None, the methods return the default values.
    """

    def __init__(self, target, name="target", accept_none=True):
        if target is None and not accept_none:
            raise UnExpectedNoneError(name)
        self._target = target
        self._name = str(name)

    def dataframe(self, time_index=False, columns=None, empty_ok=True):
        """Return a copy of the target dataframe after checking its index and columns.

        Args:
            time_index (bool): whether the dataframe must have DatetimeIndex or not
            columns (list[str] or None): the columns the dataframe must have
            empty_ok (bool): whether accept a dataframe without records or not

        Raises:
            UnExpectedTypeError: the target is not a dataframe or the index is not a DatetimeIndex
            EmptyError: the dataframe has no records when @empty_ok is False
            NotIncludedError: some of @columns were not included

        Returns:
            pandas.DataFrame: a copy of the target
        """
        if not isinstance(self._target, pd.DataFrame):
            raise UnExpectedTypeError(self._name, self._target, pd.DataFrame)
        if not empty_ok and self._target.empty:
            raise EmptyError(name=f"records of {self._name}")
        if time_index and not isinstance(self._target.index, pd.DatetimeIndex):
            raise UnExpectedTypeError(f"index of {self._name}", self._target.index, pd.DatetimeIndex)
        missing = [col for col in (columns or []) if col not in self._target.columns]
        if missing:
            raise NotIncludedError(
                missing[0], f"the columns of {self._name}", details=f"The columns are {', '.join(map(str, self._target.columns))}")
        return self._target.copy()

    def unique(self, columns):
        """Return a copy of the target dataframe after checking that the key columns identify the records.

        Args:
            columns (list[str]): key columns

        Raises:
            NotIncludedError: some of the key columns were not included
            DuplicatedKeyError: some combinations of the key columns were duplicated

        Returns:
            pandas.DataFrame: a copy of the target
        """
        df = self.dataframe(columns=columns)
        duplicated = df.duplicated(subset=columns, keep=False)
        if duplicated.any():
            raise DuplicatedKeyError(self._name, columns, df.loc[duplicated, columns].drop_duplicates())
        return df

    def float(self, value_range=(0, None), default=None):
        """Convert the target to a float value.

        Args:
            value_range (tuple(int or float or None, int or float or None)): lower and upper limits, None means un-specified
            default (float or None): default value when the target is None

        Raises:
            UnExpectedTypeError: the target cannot be converted to a float value
            UnExpectedValueRangeError: the value is out of @value_range

        Returns:
            float or None: converted value or None (when both of the target and @default are None)
        """
        target = default if self._target is None else self._target
        if target is None:
            return None
        try:
            value = float(target)
        except (TypeError, ValueError):
            raise UnExpectedTypeError(self._name, target, float) from None
        return self._in_range(value, value_range)

    def int(self, value_range=(0, None), default=None):
        """Convert the target to an integer, accepting integral float values like 3.0.

        Args:
            value_range (tuple(int or None, int or None)): lower and upper limits, None means un-specified
            default (int or None): default value when the target is None

        Raises:
            UnExpectedTypeError: the target is not an integral number
            UnExpectedValueRangeError: the value is out of @value_range

        Returns:
            int or None: converted value or None (when both of the target and @default are None)
        """
        target = default if self._target is None else self._target
        if target is None:
            return None
        try:
            value = int(target)
        except (TypeError, ValueError):
            raise UnExpectedTypeError(self._name, target, int) from None
        if value != target:
            raise UnExpectedTypeError(self._name, target, int, details=f"{target} is not an integral number")
        return self._in_range(value, value_range)

    def sequence(self, default=None, unique=False, candidates=None):
        """Convert the target (list or tuple) to a list.

        Args:
            default (list[object] or tuple(object) or None): default value when the target is None
            unique (bool): whether remove duplicated values or not, the first ones will remain
            candidates (list[object] or tuple(object) or None): acceptable values or None (no limitations)

        Raises:
            UnExpectedTypeError: the target is not a list nor a tuple
            UnExpectedValueError: the target has a value which is not included in @candidates

        Returns:
            list[object] or None: converted list or None (when both of the target and @default are None)
        """
        target = default if self._target is None else self._target
        if target is None:
            return None
        if not isinstance(target, (list, tuple)):
            raise UnExpectedTypeError(self._name, target, list, details="A tuple can be used, but it will be converted to a list")
        values = list(dict.fromkeys(target)) if unique else list(target)
        for value in values:
            if candidates is not None and value not in candidates:
                raise UnExpectedValueError(self._name, value, candidates)
        return values

    def dict(self, default=None):
        """Return the target dictionary updating @default.

        Args:
            default (dict[str, object] or None): default values, overwritten with the target

        Raises:
            UnExpectedTypeError: the target is not a dictionary

        Returns:
            dict[str, object]: the default values and the target
        """
        if self._target is not None and not isinstance(self._target, dict):
            raise UnExpectedTypeError(self._name, self._target, dict)
        return {**(default or {}), **(self._target or {})}

    def _in_range(self, value, value_range):
        """Return the value after checking that it is in the range.

        Raises:
            UnExpectedValueRangeError: the value is out of the range
        """
        lower, upper = value_range
        if (lower is not None and value < lower) or (upper is not None and value > upper):
            raise UnExpectedValueRangeError(self._name, value, value_range)
        return value
