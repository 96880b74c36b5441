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
"""

from .exceptions import (
    DestinationTooLargeError,
    ErrorKind,
    FiresplitError,
    LibraryNotFoundError,
    SourceTooLargeError,
    TokenizeError,
    UnknownTokenizerError,
    ValidationError,
)

# =============================================================================
# Public API - See firesplit/__init__.py for documentation mapping guidelines
# =============================================================================
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
