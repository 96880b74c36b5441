"""
Firesplit - Word and sentence splitting through a native tokenizer.

Firesplit drives the BlingFire tokenizer library's C buffer convention from
Python: it sizes and reuses output buffers, grows them to exactly the size
the native code asks for, and turns every failure into a typed exception.

Quick Start
-----------

    >>> from firesplit import Splitter
    >>>
    >>> splitter = Splitter()
    >>> splitter.words("I think. Sometimes, that...")
    'I think . Sometimes , that ...'
    >>> splitter.sentences("I think. Sometimes, that...")
    'I think.\\nSometimes, that...'

Reusing a buffer explicitly:

    >>> from firesplit import TextBuffer, text_to_words
    >>>
    >>> buf = TextBuffer()
    >>> for line in lines:
    ...     text_to_words(line, buf)   # Grows once, then reuses the allocation
    ...     handle(buf.view())         # Zero-copy bytes


Configuration
-------------

    FIRESPLIT_LIBRARY          Path to libblingfiretokdll (default: search)
    FIRESPLIT_MAX_TEXT_LENGTH  Default input limit in bytes
    FIRESPLIT_LOG_LEVEL        debug|info|warn|error|off (default: warn)
    FIRESPLIT_LOG_FORMAT       json|human
"""

from firesplit._bindings import library_version
from firesplit._logging import setup_logging
from firesplit.buffer import TextBuffer
from firesplit.config import MAX_TEXT_LENGTH, config
from firesplit.exceptions import (
    DestinationTooLargeError,
    ErrorKind,
    FiresplitError,
    LibraryNotFoundError,
    SourceTooLargeError,
    TokenizeError,
    UnknownTokenizerError,
    ValidationError,
)
from firesplit.protocol import transform
from firesplit.splitter import Splitter, text_to_sentences, text_to_words

# =============================================================================
# Public API
# =============================================================================
#
# Guidelines for maintainers:
#   - Only add symbols that deserve top-level documentation
#   - Use comments to group related exports into sections
#   - Other symbols remain importable via submodules
#
__all__ = [
    # Splitting
    "Splitter",
    "text_to_words",
    "text_to_sentences",
    # Buffers
    "TextBuffer",
    "transform",
    # Configuration
    "config",
    "MAX_TEXT_LENGTH",
    "setup_logging",
    "library_version",
    # Exceptions
    "FiresplitError",
    "ErrorKind",
    "TokenizeError",
    "SourceTooLargeError",
    "DestinationTooLargeError",
    "UnknownTokenizerError",
    "LibraryNotFoundError",
    "ValidationError",
]
