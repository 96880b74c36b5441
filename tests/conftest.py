"""
Global pytest fixtures for firesplit tests.

This module provides:
- Fault handling for native crashes
- Fake native tokenizers for exercising the buffer protocol
- Native library fixture (skips when the shared library is unavailable)
- Configuration reset between tests

=============================================================================
Skip Policy
=============================================================================

Tests marked ``requires_library`` run against the real blingfiretokdll
shared library. A missing library is an environmental prerequisite, not a
firesplit bug, so those tests skip rather than fail. Point FIRESPLIT_LIBRARY
at a build of the library to run them.
"""

import faulthandler

import pytest

from tests.fixtures import FakeTokenizer, split_sentences, split_words

# Enable faulthandler to trace native crashes (segfaults)
faulthandler.enable()


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def reset_config():
    """Restore environment-derived configuration after every test."""
    from firesplit.config import config

    yield config
    config.reset()


# =============================================================================
# Fake Native Tokenizers
# =============================================================================


@pytest.fixture
def words_tokenizer():
    """Fake word tokenizer with the native signature."""
    return FakeTokenizer(split_words)


@pytest.fixture
def sentences_tokenizer():
    """Fake sentence tokenizer with the native signature."""
    return FakeTokenizer(split_sentences)


@pytest.fixture
def failing_tokenizer():
    """Fake tokenizer that always reports failure (-1)."""
    return FakeTokenizer(split_words, fail_with=-1)


# =============================================================================
# Native Library
# =============================================================================


@pytest.fixture(scope="session")
def native_lib():
    """
    Load the real native tokenizer library.

    Raises:
        pytest.skip: If the library cannot be found or loaded.
    """
    from firesplit._bindings import get_lib
    from firesplit.exceptions import LibraryNotFoundError

    try:
        return get_lib()
    except LibraryNotFoundError as e:
        pytest.skip(f"Native tokenizer library not available: {e}")
