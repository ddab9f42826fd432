#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the delta2html library.

This module defines the exception classes raised while reading deltas,
building format registries and converting operations to HTML. All of them
are raised synchronously from the conversion entry point; the library never
returns partial output.

Exception Hierarchy
-------------------
- Delta2HtmlError (base exception)

  - ValidationError (input validation)
    - InvalidOperationError (operation without insert, malformed entries)
    - UnknownAttributeError (attribute missing from the registry, strict mode)

  - InvalidFormatError (malformed format descriptor)

  - FormatCallbackError (custom ``mutate`` callback failure)

  - ConfigurationError (unreadable or invalid configuration file)

"""

from typing import Any


class Delta2HtmlError(Exception):
    """Base exception class for all delta2html-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Delta2HtmlError):
    """Exception raised for invalid input deltas or parameters.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOperationError(ValidationError):
    """Exception raised when a delta contains an operation that cannot be converted.

    The most common cause is an operation without an ``insert`` key (a
    ``retain`` or ``delete`` operation), which makes the delta a change set
    rather than a document.

    Parameters
    ----------
    message : str, optional
        Custom error message
    operation_index : int, optional
        Position of the offending operation in the delta
    operation : any, optional
        The offending operation as supplied by the caller
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str | None = None,
        operation_index: int | None = None,
        operation: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid operation error."""
        if message is None:
            message = "Cannot convert delta with non-insert operations"
            if operation_index is not None:
                message += f" (operation {operation_index})"
        super().__init__(
            message, parameter_name="operation", parameter_value=operation, original_error=original_error
        )
        self.operation_index = operation_index
        self.operation = operation


class UnknownAttributeError(ValidationError):
    """Exception raised when an attribute has no entry in the format registry.

    Only raised when the converter runs with ``unknown_attributes="error"``.

    Parameters
    ----------
    attribute_name : str
        The attribute that could not be resolved
    message : str, optional
        Custom error message

    """

    def __init__(self, attribute_name: str, message: str | None = None):
        """Initialize the unknown attribute error."""
        if message is None:
            message = f"No format registered for attribute '{attribute_name}'"
        super().__init__(message, parameter_name="attributes", parameter_value=attribute_name)
        self.attribute_name = attribute_name


class InvalidFormatError(Delta2HtmlError):
    """Exception raised when a format descriptor is malformed.

    Parameters
    ----------
    message : str
        Description of the problem
    format_name : str, optional
        Registry key of the malformed descriptor
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, format_name: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid format error."""
        super().__init__(message, original_error)
        self.format_name = format_name


class FormatCallbackError(Delta2HtmlError):
    """Exception raised when a custom ``mutate`` callback fails.

    The callback's exception is kept on ``original_error`` and chained as
    ``__cause__``. The tree is left in whatever state the callback produced;
    the conversion is aborted and nothing is returned.

    Parameters
    ----------
    message : str
        Description of the callback failure
    format_name : str, optional
        Registry key of the format whose callback failed
    original_error : Exception, optional
        The exception raised by the callback

    """

    def __init__(self, message: str, format_name: str | None = None, original_error: Exception | None = None):
        """Initialize the callback error."""
        super().__init__(message, original_error)
        self.format_name = format_name


class ConfigurationError(Delta2HtmlError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error)
        self.config_path = config_path
