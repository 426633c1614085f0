#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for zxcv.

This module defines specialized exception classes for the error conditions
that can occur while fetching a URL, picking its content and launching a
viewer. The HTML rendering engine itself does not raise on malformed input.

Exception Hierarchy
-------------------
- ZxcvError (base exception)

  - ValidationError (invalid arguments)
    - UnsupportedUrlError (relative URLs, non-HTTP schemes)

  - ConfigError (invalid configuration file)

  - FetchError (transport and HTTP failures)
    - UnsupportedContentError (content type that cannot be viewed)
    - ExtractionError (expected element missing from a page)

  - ViewerError (viewer command failures)

"""

from typing import Any


class ZxcvError(Exception):
    """Base exception class for all zxcv-specific errors.

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


class ValidationError(ZxcvError):
    """Exception raised for invalid input parameters.

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


class UnsupportedUrlError(ValidationError):
    """Exception raised when a URL cannot be viewed at all.

    Parameters
    ----------
    message : str
        Description of the problem
    url : str
        The offending URL

    """

    def __init__(self, message: str, url: str, original_error: Exception | None = None):
        """Initialize the error with the rejected URL."""
        super().__init__(message, parameter_name="url", parameter_value=url, original_error=original_error)
        self.url = url


class ConfigError(ZxcvError):
    """Exception raised for an unreadable or invalid configuration.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the configuration file, when loaded from disk
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class FetchError(ZxcvError):
    """Exception raised when a URL or one of its related API calls cannot be fetched.

    Parameters
    ----------
    message : str
        Description of the fetch failure
    url : str, optional
        URL being fetched
    status_code : int, optional
        HTTP status code, when a response was received
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the fetch error with request details."""
        super().__init__(message, original_error=original_error)
        self.url = url
        self.status_code = status_code


class UnsupportedContentError(FetchError):
    """Exception raised for a response whose content type has no viewer."""

    def __init__(self, content_type: str, url: str | None = None):
        """Initialize the error from the unsupported media type."""
        super().__init__(f"Content type {content_type} is not supported.", url=url)
        self.content_type = content_type


class ExtractionError(FetchError):
    """Exception raised when a page does not have the expected structure."""


class ViewerError(ZxcvError):
    """Exception raised when the viewer command cannot be run or fails.

    Parameters
    ----------
    message : str
        Description of the failure
    argv : list of str, optional
        The command line that was (or would have been) executed
    returncode : int, optional
        Exit status of the viewer
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        argv: list[str] | None = None,
        returncode: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the viewer error."""
        super().__init__(message, original_error=original_error)
        self.argv = argv
        self.returncode = returncode


__all__ = [
    "ZxcvError",
    "ValidationError",
    "UnsupportedUrlError",
    "ConfigError",
    "FetchError",
    "UnsupportedContentError",
    "ExtractionError",
    "ViewerError",
]
