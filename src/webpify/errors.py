"""Exception hierarchy for webpify."""

from __future__ import annotations


class WebpifyError(Exception):
    """Base error for all user-facing webpify failures.

    Attributes
    ----------
    exit_code : int
        Process exit code the CLI uses when this error reaches the top level.
    """

    exit_code: int = 1


class UsageError(WebpifyError):
    """Raised when command-line usage is invalid."""


class InvalidQualityError(UsageError):
    """Raised when the quality value is not an integer in [1, 100]."""


class InputNotFoundError(WebpifyError):
    """Raised when the input image path does not exist."""


class ConversionError(WebpifyError):
    """Raised when conversion parameters are rejected before encoding."""


class CodecError(WebpifyError):
    """Raised when the image library fails to decode or encode."""


class DependencyError(WebpifyError):
    """Raised when the image library lacks a required capability."""
