#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the bvmarkup library.

Component transforms never raise on malformed markup: missing attributes fall
back to defaults and deprecated usage is only reported. The exceptions below
cover the surfaces around the engine, namely option validation, configuration
files and the command-line entry point.

Exception Hierarchy
-------------------
- BvMarkupError (base exception)

  - ValidationError (invalid option values)

  - FileError (input/config file access)

  - ParsingError (malformed configuration files)

"""

from typing import Any


class BvMarkupError(Exception):
    """Base exception class for all bvmarkup-specific errors.

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


class ValidationError(BvMarkupError):
    """Exception raised for invalid option values.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class FileError(BvMarkupError):
    """Exception raised when an input, output or config file cannot be used.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(BvMarkupError):
    """Exception raised when a configuration file cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The format being parsed when the error occurred (e.g. "toml")
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
