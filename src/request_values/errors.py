"""Error types raised by the request values package."""

from __future__ import annotations


class RequestValuesError(Exception):
    """Base class for request values errors."""


class InvalidURL(RequestValuesError, ValueError):
    """Raised when URL components do not resolve to a usable request URL."""


class ExtensionKeyError(RequestValuesError, TypeError):
    """Raised when an extension key is declared or used incorrectly."""
