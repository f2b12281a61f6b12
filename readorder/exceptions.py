"""Custom exception classes for the reading-order pipeline.

This module defines a hierarchy of custom exceptions to provide better
error handling and more specific error messages throughout the pipeline.

Exception Hierarchy:
    PipelineError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigError
    │   └── MissingConfigError
    ├── ProcessingError
    │   └── OrderingError
    └── FileError
        ├── FileLoadError
        ├── FileSaveError
        └── FileFormatError

The XY-Cut++ core itself never raises: degenerate geometry is resolved by
policy. These exceptions cover the configuration, I/O and orchestration
layers around it.

Usage:
    try:
        pages = load_pages_from_json(path)
    except FileFormatError as e:
        logger.error("Malformed input: %s", e)
    except FileError as e:
        logger.error("Cannot read input: %s", e)
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all pipeline errors.

    All custom exceptions in the pipeline should inherit from this class.
    This allows catching all pipeline-specific errors with a single handler.
    """


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(PipelineError):
    """Base exception for configuration-related errors."""


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid or malformed.

    Examples:
        - Unknown sorter name
        - Unknown direction or renderer
        - Gap ratio outside [0, 1)
    """


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing.

    Examples:
        - Config file passed explicitly but not found
        - Missing page dimensions
    """


# ============================================================================
# Processing Errors
# ============================================================================


class ProcessingError(PipelineError):
    """Base exception for document processing errors."""


class OrderingError(ProcessingError):
    """Raised when a sorter returns something that is not a reading order.

    Examples:
        - Sorter dropped or duplicated elements
    """


# ============================================================================
# File Errors
# ============================================================================


class FileError(PipelineError):
    """Base exception for file operation errors."""


class FileLoadError(FileError):
    """Raised when loading a file fails.

    Examples:
        - File not found
        - Permission denied
    """


class FileSaveError(FileError):
    """Raised when saving a file fails.

    Examples:
        - Permission denied
        - Invalid path
    """


class FileFormatError(FileError):
    """Raised when file format is invalid or unsupported.

    Examples:
        - Malformed JSON
        - Page without width/height
        - Box without coordinates
    """
