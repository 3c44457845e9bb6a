#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdrender library.

This module defines specialized exception classes for the error conditions
that can occur while loading options and rendering markdown. Blocked
resources are never raised; they are reported as diagnostics on the rendered
document.

Exception Hierarchy
-------------------
- MdRenderError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (malformed options record or JSON)

  - InputEncodingError (markdown or options not valid UTF-8)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, directories, locked files)

  - RenderingError (output generation failures)

"""

from typing import Any


class MdRenderError(Exception):
    """Root of every error mdrender raises.

    Catching it is enough to handle any failure of a render call; blocked
    resources never surface here.

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


class ValidationError(MdRenderError):
    """A caller-supplied value was rejected.

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


class InvalidOptionsError(ValidationError):
    """Exception raised when a render options record cannot be loaded.

    Raised for unparsable options JSON, a payload that is not a JSON object,
    or a field carrying a value of the wrong type.

    Parameters
    ----------
    message : str
        Description of what is wrong with the options
    parameter_name : str, optional
        Name of the offending field, if a single field is at fault
    parameter_value : any, optional
        The offending value
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
        """Initialize the invalid options error."""
        super().__init__(
            message, parameter_name=parameter_name, parameter_value=parameter_value, original_error=original_error
        )


class InputEncodingError(MdRenderError):
    """Exception raised when input bytes are not valid UTF-8.

    Parameters
    ----------
    message : str
        Description of the encoding problem
    original_error : Exception, optional
        The underlying ``UnicodeDecodeError``

    """

    def __init__(self, message: str = "invalid utf-8 input", original_error: Exception | None = None):
        """Initialize the encoding error."""
        super().__init__(message, original_error=original_error)


class FileError(MdRenderError):
    """A markdown file could not be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The markdown file passed to :func:`mdrender.render_file` does not exist.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"Markdown file not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """The markdown file exists but cannot be read.

    Raised for permission errors and for directories passed as files.

    Parameters
    ----------
    file_path : str
        Path to the file that cannot be accessed
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot read markdown file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(MdRenderError):
    """Exception raised when a rendered document cannot be produced or serialized.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)


__all__ = [
    "MdRenderError",
    "ValidationError",
    "InvalidOptionsError",
    "InputEncodingError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "RenderingError",
]
