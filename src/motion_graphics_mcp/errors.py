"""Structured error handling: error categories, classification, and tool error model."""

from __future__ import annotations

from enum import Enum

import httpx
from pydantic import BaseModel, ValidationError


class ErrorCategory(str, Enum):
    """Categories of errors for diagnostics."""

    INVALID_INPUT = "INVALID_INPUT"
    CONFIG_INVALID = "CONFIG_INVALID"
    BRAND_PROVIDER_FAILED = "BRAND_PROVIDER_FAILED"
    NETWORK_ERROR = "NETWORK_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNKNOWN = "UNKNOWN"


class InvalidInputError(ValueError):
    """Raised when a generation request cannot produce a meaningful config.

    Covers non-positive durations and canvas sizes, mismatched media lists,
    empty entity lists handed to a direct builder, and out-of-range panel
    counts or progress values.
    """


class BrandProviderError(RuntimeError):
    """Raised by brand bible providers when the upstream source misbehaves."""


class ToolError(BaseModel):
    """Structured error returned from any tool."""

    error: str
    category: str
    hint: str
    retryable: bool = False


def categorize_error(error: Exception) -> tuple[ErrorCategory, str]:
    """Map an exception to an ErrorCategory + human-readable hint."""
    if isinstance(error, InvalidInputError):
        return (
            ErrorCategory.INVALID_INPUT,
            "Check duration, canvas size, media lists and entity values",
        )
    if isinstance(error, ValidationError):
        return (
            ErrorCategory.CONFIG_INVALID,
            "Configuration value rejected; see the error message for the field",
        )
    if isinstance(error, PermissionError):
        return (
            ErrorCategory.PERMISSION_DENIED,
            "Set INFRA_MUTATIONS_ENABLED=true and pass auth_token when INFRA_ADMIN_TOKEN is set",
        )
    if isinstance(error, BrandProviderError):
        return (
            ErrorCategory.BRAND_PROVIDER_FAILED,
            "Brand bible source returned an unusable response; check BRAND_BIBLE_URL",
        )
    if isinstance(error, (TimeoutError, httpx.TimeoutException, httpx.NetworkError)):
        return (
            ErrorCategory.NETWORK_ERROR,
            "Request timed out or failed to connect; try again or check connectivity",
        )

    s = str(error).lower()
    if "timeout" in s or "timed out" in s:
        return (
            ErrorCategory.NETWORK_ERROR,
            "Request timed out; try again or check connectivity",
        )
    if isinstance(error, ValueError):
        return (
            ErrorCategory.INVALID_INPUT,
            "Bad request; check input format",
        )

    return (ErrorCategory.UNKNOWN, str(error))


def make_tool_error(error: Exception) -> dict:
    """Create a serialisable ToolError dict from an exception."""
    cat, hint = categorize_error(error)
    return ToolError(
        error=str(error),
        category=cat.value,
        hint=hint,
        retryable=cat == ErrorCategory.NETWORK_ERROR,
    ).model_dump(mode="json")
