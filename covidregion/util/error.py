#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covidregion.util.config import config


class _BaseException(Exception):
    """Basic class of the exceptions of covidregion, which logs itself at ERROR level when raised.

    Args:
        message (str): main message of error, should be set in child classes
        details (str or None): details of error
        log (str): short description used by logger
    """

    def __init__(self, message, details=None, log="exception raised"):
        config.error(f"{self.__class__.__name__}: {log}")
        self.message = str(message)
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        return self.message if self.details is None else f"{self.message}. {self.details}"


class _ValidationError(_BaseException):
    """Basic class of the exceptions raised when an argument or a table is invalid.

    Args:
        name (str): name of the argument or the table
        message (str): main message of error
        details (str or None): details of error
    """

    def __init__(self, name, message, details=None):
        self.name = str(name)
        super().__init__(message=message, details=details, log=f"{self.name} is invalid")


class UnExpectedNoneError(_ValidationError):
    """Error when None was applied to an argument which requires values.
    """

    def __init__(self, name, details=None):
        super().__init__(name=name, message=f"'{name}' must not be None", details=details)


class UnExpectedTypeError(_ValidationError):
    """Error when a value cannot be handled as an instance of the expected class.

    Args:
        name (str): name of the argument
        target (object): the value
        expected (type): expected class
        details (str or None): details of error
    """

    def __init__(self, name, target, expected, details=None):
        expected_name = getattr(expected, "__name__", str(expected))
        message = f"'{name}' must be {expected_name}, but {type(target).__name__} was applied"
        super().__init__(name=name, message=message, details=details)


class UnExpectedValueRangeError(_ValidationError):
    """Error when a value is out of the expected range.

    Args:
        name (str): name of the argument
        target (int or float): the value
        value_range (tuple(int or float or None, int or float or None)): lower and upper limits, None means un-specified
        details (str or None): details of error
    """

    def __init__(self, name, target, value_range, details=None):
        lower, upper = ("-inf" if value_range[0] is None else value_range[0]), ("inf" if value_range[1] is None else value_range[1])
        message = f"'{name}' must be in the range [{lower}, {upper}], but {target} was applied"
        super().__init__(name=name, message=message, details=details)


class UnExpectedValueError(_ValidationError):
    """Error when a value is not one of the candidates.

    Args:
        name (str): name of the argument
        value (object): the value
        candidates (list[object]): acceptable values
        details (str or None): details of error
    """

    def __init__(self, name, value, candidates, details=None):
        c_str = ", ".join(str(candidate) for candidate in candidates)
        super().__init__(name=name, message=f"'{name}' must be one of [{c_str}], but {value} was applied", details=details)


class NotIncludedError(_ValidationError):
    """Error when a table does not have a required column.

    Args:
        key_name (str): name of the column
        container_name (str): name of the table
        details (str or None): details of error
    """

    def __init__(self, key_name, container_name, details=None):
        super().__init__(name=container_name, message=f"'{key_name}' was not included in {container_name}", details=details)


class EmptyError(_ValidationError):
    """Error when a table has no records or no columns to process.
    """

    def __init__(self, name, details=None):
        super().__init__(name=name, message=f"No {name} were found", details=details)


class DateFormatError(_ValidationError):
    """Error when date labels of a wide table cannot be parsed.

    Args:
        name (str): name of the labels
        values (list[str]): labels which could not be parsed
        date_format (str): expected format, like %m/%d/%y
        details (str or None): details of error
    """

    def __init__(self, name, values, date_format, details=None):
        v_str = ", ".join(f"'{value}'" for value in values[:5])
        if len(values) > 5:
            v_str += f" and {len(values) - 5} more"
        message = f"{len(values)} of {name} could not be parsed as dates with format {date_format}: {v_str}"
        super().__init__(name=name, message=message, details=details)


class DuplicatedKeyError(_ValidationError):
    """Error when records must be unique with key columns, but some keys are duplicated.

    Args:
        name (str): name of the table
        keys (list[str]): key column names
        duplicates (pandas.DataFrame): duplicated combinations of the keys
        details (str or None): details of error
    """

    def __init__(self, name, keys, duplicates, details=None):
        examples = duplicates.head(3).astype(str).agg("/".join, axis=1).tolist()
        message = f"{name} has {len(duplicates)} duplicated combination(s) of {', '.join(keys)}, like {examples}"
        super().__init__(name=name, message=message, details=details)


class NotEnoughDataError(_ValidationError):
    """Error when the number of records is too small for the analysis.

    Args:
        name (str): name of the records
        value (pandas.DataFrame): the records
        required_n (int): the number of records must be over this value
        details (str or None): details of error
    """

    def __init__(self, name, value, required_n, details=None):
        message = f"More than {required_n} records are required, but {name} has only {len(value)} records"
        super().__init__(name=name, message=message, details=details)


class UnExecutedError(_BaseException):
    """Error when a stage was called before the stage which provides its input.

    Args:
        name (str): the method to call in advance
        details (str or None): details of error
    """

    def __init__(self, name, details=None):
        super().__init__(message=f"Please execute {name} in advance", details=details, log=f"{name} has not been executed")


class SubsetNotFoundError(_BaseException):
    """Error when no records were found for the location.

    Args:
        country (str or None): country name
        province (str or None): province name
        details (str or None): details of error
    """

    def __init__(self, country=None, province=None, details=None):
        area = "the location" if country is None else (f"{province}/{country}" if province else country)
        super().__init__(message=f"No records of {area} were found", details=details, log=f"subset of {area} is empty")


class DownloadError(_BaseException):
    """Error when a remote file could not be retrieved.

    Args:
        url (str): URL of the file
        reason (object): HTTP status or the exception raised by urllib3
        details (str or None): details of error
    """

    def __init__(self, url, reason, details=None):
        super().__init__(message=f"Failed in retrieving {url} ({reason})", details=details, log=f"retrieving {url} failed")
