"""
Custom exceptions for the geocoord package.
"""

from typing import Any, Dict, Optional


class GeoCoordException(Exception):
    """Base exception for all package-specific errors."""

    def __init__(
        self,
        message: str,
        code: str = "GENERIC_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(GeoCoordException):
    """Raised when a coordinate receives a value it cannot interpret."""

    def __init__(self, axis_kind: Any, value: Any, message: Optional[str] = None):
        axis_name = getattr(axis_kind, "value", axis_kind)
        value_type = type(value).__name__

        self.axis_kind = axis_kind
        self.value = value
        self.value_type = value_type

        super().__init__(
            message=message or f"Not allowed value for {axis_name} coordinate: ({value_type}) {value!r}",
            code="INVALID_INPUT",
            details={
                "axis_kind": axis_name,
                "value": repr(value),
                "value_type": value_type
            }
        )


class UnsupportedFormatError(GeoCoordException):
    """Raised when a coordinate is asked for an unknown output kind."""

    def __init__(self, output_kind: Any, details: Optional[Dict[str, Any]] = None):
        error_details = details or {}
        error_details["output_kind"] = repr(output_kind)

        super().__init__(
            message=f"Unsupported output kind: {output_kind!r}",
            code="UNSUPPORTED_FORMAT",
            details=error_details
        )
