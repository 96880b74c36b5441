"""
Firesplit exceptions.

This module defines the exception hierarchy for firesplit:

    FiresplitError (base)
    ├── TokenizeError - A tokenizer call failed
    │   ├── SourceTooLargeError - Source text exceeds the length limit
    │   ├── DestinationTooLargeError - Buffer capacity exceeds the C int range
    │   └── UnknownTokenizerError - The native function reported failure
    ├── LibraryNotFoundError - The native tokenizer library could not be loaded
    └── ValidationError - Invalid parameter value

Usage:
    try:
        splitter.words(text)
    except firesplit.SourceTooLargeError as e:
        print(f"Input too long, limit is {e.details['limit']} bytes")
    except firesplit.TokenizeError as e:
        print(f"Tokenization failed ({e.kind.name}): {e}")
    except firesplit.FiresplitError as e:
        # Catch any firesplit error with structured details
        print(f"Error {e.code}: {e}")
        print(f"Details: {e.details}")

See Also
--------
    FiresplitError : Base exception for all firesplit errors.
"""

from enum import Enum
from typing import Any

__all__ = [
    # Base
    "FiresplitError",
    # Tokenize
    "ErrorKind",
    "TokenizeError",
    "SourceTooLargeError",
    "DestinationTooLargeError",
    "UnknownTokenizerError",
    # Library
    "LibraryNotFoundError",
    # Validation
    "ValidationError",
]


class ErrorKind(Enum):
    """Flat classification of tokenizer call failures."""

    SOURCE_TOO_LARGE = "SOURCE_TOO_LARGE"
    DESTINATION_TOO_LARGE = "DESTINATION_TOO_LARGE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class FiresplitError(Exception):
    """
    Base exception for all firesplit errors.

    All firesplit-specific exceptions inherit from this class, enabling:
    - Catch-all handling: ``except firesplit.FiresplitError``
    - Stable string-based error codes for programmatic handling
    - Structured details for debugging and logging

    Attributes
    ----------
    message : str
        Human-readable error description.
    code : str
        Stable, string-based error code (e.g., "SOURCE_TOO_LARGE").
        Use this for programmatic error handling.
    details : dict[str, Any]
        Structured context (e.g., {"limit": 1073741823, "length": ...}).
    original_code : int | None
        The raw integer returned by the native function, when there is one.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_code = original_code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, code={self.code!r})"


# =============================================================================
# Tokenize Errors
# =============================================================================


class TokenizeError(FiresplitError, RuntimeError):
    """
    A call into the native tokenizer failed.

    Every tokenize error is terminal for the call that raised it: nothing is
    retried, and the destination buffer is left empty.

    Attributes
    ----------
    kind : ErrorKind
        Which of the failure kinds occurred.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code or self.kind.value, details, original_code)


class SourceTooLargeError(TokenizeError, ValueError):
    """
    Source text is longer than the tokenizer accepts.

    The limit leaves room for the worst case where every input byte expands
    to two output bytes plus a terminator. ``details["limit"]`` holds the
    limit in bytes and ``details["length"]`` the rejected length.
    """

    kind = ErrorKind.SOURCE_TOO_LARGE

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if message is None:
            limit = (details or {}).get("limit")
            message = f"Source text is too large (limit is {limit} bytes)."
        super().__init__(message, code, details, original_code)


class DestinationTooLargeError(TokenizeError, OverflowError):
    """
    Destination buffer capacity does not fit the native C int.

    Practically unreachable through :class:`~firesplit.TextBuffer` growth,
    since the native function can only request capacities inside that range.
    """

    kind = ErrorKind.DESTINATION_TOO_LARGE

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if message is None:
            message = "Destination buffer capacity exceeds the native int range."
        super().__init__(message, code, details, original_code)


class UnknownTokenizerError(TokenizeError):
    """
    The native function returned a failure signal with no further detail.

    ``original_code`` holds the raw return value.
    """

    kind = ErrorKind.UNKNOWN_ERROR

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if message is None:
            message = (
                f"An unknown error caused the tokenizer to fail "
                f"(the native function returned {original_code})."
            )
        super().__init__(message, code, details, original_code)


# =============================================================================
# Library Errors
# =============================================================================


class LibraryNotFoundError(FiresplitError, OSError):
    """
    The native tokenizer library could not be located or loaded.

    Set ``FIRESPLIT_LIBRARY`` (or ``firesplit.config.library_path``) to the
    path of the shared library. ``details["searched"]`` lists every
    candidate that was tried.
    """

    def __init__(
        self,
        message: str,
        code: str = "LIBRARY_NOT_FOUND",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(FiresplitError, ValueError):
    """
    Invalid parameter value.

    Raised when a configuration value or argument has the wrong type or is
    out of range.
    """

    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code)
