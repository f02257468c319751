#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/exceptions.py
"""Custom exceptions for the orgast library.

The org-mode parser itself is total: malformed markup degrades into plain
paragraphs instead of raising. The exceptions below are raised only at the
edges of the library (option validation, file input, output writing, strict
mode and unexpected internal failures).

Exception Hierarchy
-------------------
- OrgAstError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or serializer)

  - FileError (file access and I/O)
    - OrgFileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, unreadable files)

  - ParsingError (unexpected parser failures)
    - StrictModeError (unterminated constructs when ``strict=True``)

  - RenderingError (serialization failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class OrgAstError(Exception):
    """Base exception class for all orgast-specific errors.

    Catching this will catch every error raised by the library.

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


class ValidationError(OrgAstError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation failure
    parameter_name : str, optional
        Name of the parameter that failed validation
    parameter_value : Any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The underlying exception, if any

    Attributes
    ----------
    parameter_name : str or None
        Name of the invalid parameter
    parameter_value : Any
        The invalid value

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error."""
        super().__init__(message, original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a parser or serializer receives the wrong options class.

    Parameters
    ----------
    converter_name : str
        Name of the component that rejected the options (e.g. ``"OrgParser"``)
    expected_type : type
        The options class that was expected
    received_type : type
        The options class that was actually provided
    message : str, optional
        Custom error message. If not provided, one is generated

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(OrgAstError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the file involved
    original_error : Exception, optional
        The underlying I/O exception

    Attributes
    ----------
    file_path : str or None
        Path to the file involved

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error."""
        super().__init__(message, original_error)
        self.file_path = file_path


class OrgFileNotFoundError(FileError):
    """Exception raised when an input file does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when an input file exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(OrgAstError):
    """Exception raised when parsing fails unexpectedly.

    Malformed org text never raises this; it wraps internal failures so that
    callers get a library exception with the original error attached.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        Stage of parsing where the error occurred (e.g. ``"headlines"``)
    original_error : Exception, optional
        The underlying exception

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class StrictModeError(ParsingError):
    """Exception raised in strict mode for constructs the lenient parser tolerates.

    Parameters
    ----------
    construct : str
        The construct that was rejected (e.g. ``"src-block"``, ``"drawer"``, ``":END:"``)
    line_number : int
        1-based line number where the construct starts
    message : str, optional
        Custom error message. If not provided, one is generated

    Attributes
    ----------
    construct : str
        The rejected construct
    line_number : int
        1-based line number of the construct

    """

    def __init__(self, construct: str, line_number: int, message: str | None = None):
        """Initialize the strict mode error."""
        if message is None:
            message = f"Unterminated {construct} starting at line {line_number}"
        super().__init__(message, parsing_stage="strict")
        self.construct = construct
        self.line_number = line_number


class RenderingError(OrgAstError):
    """Exception raised when serializing an AST fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        Stage where the error occurred
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing serialized output fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "OrgAstError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "OrgFileNotFoundError",
    "FileAccessError",
    "ParsingError",
    "StrictModeError",
    "RenderingError",
    "OutputWriteError",
]
