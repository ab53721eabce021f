#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the events2md library.

This module defines specialized exception classes for the error conditions
that can occur while reading event streams and rendering them to Markdown.

Exception Hierarchy
-------------------
- Events2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - ParsingError (event stream or embedded markup parsing failures)
    - MarkupParseError (raw inline markup such as abbreviation tags)

  - RenderingError (output generation failures, broken event nesting)
    - OutputWriteError (file write failures)

  - DependencyError (missing optional packages)

"""

from typing import Any


class Events2MdError(Exception):
    """Base exception class for all events2md-specific errors.

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


class ValidationError(Events2MdError):
    """Exception raised for invalid input parameters or options.

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Events2MdError):
    """Base exception for file access and I/O errors.

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


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Events2MdError):
    """Exception raised when an event stream or embedded markup cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class MarkupParseError(ParsingError):
    """Exception raised when raw inline markup is not in the expected shape.

    The renderer recovers from this error by emitting the markup verbatim.

    Parameters
    ----------
    message : str
        Description of what is wrong with the markup
    markup : str
        The raw markup that failed to parse

    """

    def __init__(self, message: str, markup: str, original_error: Exception | None = None):
        """Initialize the markup parse error."""
        super().__init__(message, parsing_stage="raw_markup", original_error=original_error)
        self.markup = markup


class RenderingError(Events2MdError):
    """Exception raised when output rendering fails.

    This covers broken preconditions of the event stream that make it
    impossible to produce valid Markdown, such as:
    - Closing more nested scopes than were opened
    - List items outside of any list
    - Table cells outside of any table row
    - Unknown event types or unsupported macros (when configured to fail)

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing the output file fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(Events2MdError):
    """Exception raised when an optional dependency is not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring the dependency
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.install_command = install_command
        self.original_import_error = original_import_error
