"""
Error handling utilities for the tag cloud generator.

Provides structured exception classes and a helper that turns any
exception into a serializable error response.
"""

import logging
import traceback
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class TagCloudError(Exception):
    """Base exception for tag cloud errors."""
    
    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize tag cloud error.
        
        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(TagCloudError):
    """Raised when input validation fails."""
    
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR"
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details
        )


class InvalidCountError(ValidationError):
    """Raised when the requested number of words is negative or not an integer."""
    
    def __init__(self, count: Any):
        super().__init__(
            message=f"Word count must be a non-negative integer, got {count!r}.",
            details={"count": repr(count)},
            error_code="INVALID_COUNT"
        )


class ConfigurationError(ValidationError):
    """Raised when a configuration value cannot be parsed or is out of range."""
    
    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            message=f"Invalid value {value!r} for {setting}: {reason}",
            details={"setting": setting, "value": repr(value)},
            error_code="CONFIGURATION_ERROR"
        )


class SourceUnavailableError(TagCloudError):
    """Raised when the input text cannot be opened."""
    
    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Unable to open input file '{path}'."
        if reason:
            message += f" {reason}"
        super().__init__(
            message=message,
            error_code="SOURCE_UNAVAILABLE",
            details={"path": str(path)}
        )


class OutputUnavailableError(TagCloudError):
    """Raised when the output document cannot be written."""
    
    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Unable to write output file '{path}'."
        if reason:
            message += f" {reason}"
        super().__init__(
            message=message,
            error_code="OUTPUT_UNAVAILABLE",
            details={"path": str(path)}
        )


def error_to_dict(
    error: Exception,
    include_traceback: bool = False
) -> Dict[str, Any]:
    """
    Create a standardized error response.
    
    Args:
        error: Exception instance
        include_traceback: Whether to include traceback in response (for debugging)
    
    Returns:
        Dict with error message, error code and optional details
    """
    logger.error(
        f"Error: {type(error).__name__}: {str(error)}",
        exc_info=include_traceback
    )
    
    if isinstance(error, TagCloudError):
        response = {
            "error": error.message,
            "error_code": error.error_code,
        }
        if error.details:
            response["details"] = error.details
        if include_traceback:
            response["traceback"] = traceback.format_exc()
        return response
    
    error_message = str(error)
    if not include_traceback:
        error_message = "An unexpected error occurred."
    
    response = {
        "error": error_message,
        "error_code": "INTERNAL_ERROR",
        "error_type": type(error).__name__,
    }
    if include_traceback:
        response["traceback"] = traceback.format_exc()
    return response
