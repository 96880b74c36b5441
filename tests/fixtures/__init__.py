"""
Shared test helpers.

Provides a stand-in for the native tokenizer functions so the buffer
protocol can be exercised without the shared library, plus the reference
texts used across the suite.
"""

from .native import (
    TEST_TEXT,
    TEST_TEXT_SENTENCES,
    TEST_TEXT_WORDS,
    FakeTokenizer,
    split_sentences,
    split_words,
)

__all__ = [
    "TEST_TEXT",
    "TEST_TEXT_SENTENCES",
    "TEST_TEXT_WORDS",
    "FakeTokenizer",
    "split_sentences",
    "split_words",
]
