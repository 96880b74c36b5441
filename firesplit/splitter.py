"""
Word and sentence splitting.

Provides the Splitter class and the ``text_to_words`` / ``text_to_sentences``
functions that fill a caller-owned :class:`~firesplit.buffer.TextBuffer`.
"""

from __future__ import annotations

import threading

from ._bindings import get_lib
from ._logging import scoped_logger
from .buffer import TextBuffer
from .config import _check_max_text_length
from .protocol import NativeTokenizer, Source, transform

__all__ = ["Splitter", "text_to_sentences", "text_to_words"]

logger = scoped_logger("splitter")


def text_to_words(source: Source, destination: TextBuffer) -> None:
    """
    Split ``source`` into words, writing space-separated tokens to ``destination``.

    Punctuation becomes its own token and line breaks are treated as spaces.

    Example:
        >>> buf = TextBuffer()
        >>> text_to_words("I think. Sometimes, that...", buf)
        >>> str(buf)
        'I think . Sometimes , that ...'
    """
    transform(get_lib().TextToWords, source, destination)


def text_to_sentences(source: Source, destination: TextBuffer) -> None:
    """
    Split ``source`` into sentences, one per line, writing them to ``destination``.

    Example:
        >>> buf = TextBuffer()
        >>> text_to_sentences("I think. Sometimes, that...", buf)
        >>> str(buf)
        'I think.\\nSometimes, that...'
    """
    transform(get_lib().TextToSentences, source, destination)


class Splitter:
    """
    Word and sentence splitter with a reusable output buffer per thread.

    A Splitter can be shared between threads: each thread gets its own
    buffer, which grows to fit the largest output seen on that thread and
    is then reused without reallocating.

    Attributes
    ----------
    max_text_length : int | None
        Source length limit in bytes for this splitter, or None to follow
        ``config.max_text_length``.

    Example:
        >>> splitter = Splitter()
        >>> splitter.words("Hello, world!")
        'Hello , world !'
        >>> splitter.sentences("One. Two.")
        'One.\\nTwo.'
    """

    __slots__ = ("_words_fn", "_sentences_fn", "_local", "_max_text_length")

    def __init__(
        self,
        words_fn: NativeTokenizer | None = None,
        sentences_fn: NativeTokenizer | None = None,
        *,
        max_text_length: int | None = None,
    ):
        """
        Create a splitter.

        Args:
            words_fn: Word tokenizer with the native signature. Defaults to
                ``TextToWords`` from the native library.
            sentences_fn: Sentence tokenizer with the native signature.
                Defaults to ``TextToSentences`` from the native library.
            max_text_length: Per-splitter source length limit in bytes.

        Raises
        ------
            LibraryNotFoundError: If a default is needed and the native
                library cannot be loaded.
            ValidationError: If max_text_length is not a positive int within
                MAX_TEXT_LENGTH.
        """
        if words_fn is None or sentences_fn is None:
            lib = get_lib()
            if words_fn is None:
                words_fn = lib.TextToWords
            if sentences_fn is None:
                sentences_fn = lib.TextToSentences
        self._words_fn = words_fn
        self._sentences_fn = sentences_fn
        self._local = threading.local()
        self.max_text_length = max_text_length

    @property
    def max_text_length(self) -> int | None:
        """Source length limit in bytes, or None to follow ``config.max_text_length``."""
        return self._max_text_length

    @max_text_length.setter
    def max_text_length(self, value: int | None) -> None:
        self._max_text_length = None if value is None else _check_max_text_length(value)

    def _buffer(self) -> TextBuffer:
        buf = getattr(self._local, "buffer", None)
        if buf is None:
            buf = self._local.buffer = TextBuffer()
            logger.debug(
                "Created splitter buffer", extra={"thread": threading.current_thread().name}
            )
        return buf

    def words_into(self, text: Source, buffer: TextBuffer) -> None:
        """Split ``text`` into words, writing the result to ``buffer``."""
        transform(self._words_fn, text, buffer, max_text_length=self.max_text_length)

    def sentences_into(self, text: Source, buffer: TextBuffer) -> None:
        """Split ``text`` into sentences, writing the result to ``buffer``."""
        transform(self._sentences_fn, text, buffer, max_text_length=self.max_text_length)

    def words(self, text: Source) -> str:
        """
        Split ``text`` into space-separated words and punctuation.

        Raises
        ------
            SourceTooLargeError: If ``text`` exceeds the length limit.
            UnknownTokenizerError: If the native tokenizer fails.
        """
        buf = self._buffer()
        self.words_into(text, buf)
        return buf.text

    def sentences(self, text: Source) -> str:
        """
        Split ``text`` into sentences separated by newlines.

        Raises
        ------
            SourceTooLargeError: If ``text`` exceeds the length limit.
            UnknownTokenizerError: If the native tokenizer fails.
        """
        buf = self._buffer()
        self.sentences_into(text, buf)
        return buf.text

    def __repr__(self) -> str:
        return f"Splitter(max_text_length={self.max_text_length})"
