"""
Buffer negotiation with the native tokenizer.

The native functions follow the classic C convention: write at most
``dst_cap`` bytes into a caller-supplied buffer and return either the number
of bytes written (including a terminator) or, when that does not fit, the
capacity that would have been enough. ``transform`` drives that convention
to completion against a reusable :class:`~firesplit.buffer.TextBuffer`.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Union

from ._bindings import to_c_int
from ._logging import scoped_logger
from .buffer import TextBuffer
from .config import _check_max_text_length, config
from .exceptions import DestinationTooLargeError, SourceTooLargeError, UnknownTokenizerError

__all__ = ["SignalKind", "Source", "classify_signal", "transform"]

logger = scoped_logger("protocol")

# int fn(const char *src, int src_len, char *dst, int dst_cap)
NativeTokenizer = Callable[[bytes, int, Any, int], int]

Source = Union[str, bytes, bytearray, memoryview]


class SignalKind(Enum):
    """What a native return value means for the call in progress."""

    SUCCESS = "success"
    NEEDS_CAPACITY = "needs_capacity"
    FAILURE = "failure"


def classify_signal(signal: int, capacity: int) -> SignalKind:
    """
    Classify a native return value against the capacity that was offered.

    A successful call always writes at least the terminator, so zero is a
    failure just like any negative value.
    """
    if signal <= 0:
        return SignalKind.FAILURE
    if signal > capacity:
        return SignalKind.NEEDS_CAPACITY
    return SignalKind.SUCCESS


def _encode(source: Source) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    return bytes(source)


def transform(
    tokenizer: NativeTokenizer,
    source: Source,
    destination: TextBuffer,
    *,
    max_text_length: int | None = None,
) -> None:
    """
    Run ``tokenizer`` over ``source`` and leave its output in ``destination``.

    The destination is cleared first; its allocation is reused when large
    enough and otherwise grown to exactly the size the tokenizer asks for.

    Args:
        tokenizer: Native function (or any callable with the same signature).
        source: Text to tokenize. ``str`` is encoded as UTF-8; bytes-like
            input must already be valid UTF-8.
        destination: Buffer that receives the output.
        max_text_length: Source length limit in bytes. Defaults to
            ``config.max_text_length``. Must be a positive int within
            ``MAX_TEXT_LENGTH``.

    Raises
    ------
        SourceTooLargeError: If ``source`` is longer than the limit. The
            tokenizer is not called.
        DestinationTooLargeError: If the buffer capacity does not fit a C int.
        ValidationError: If ``max_text_length`` is outside 1..MAX_TEXT_LENGTH.
        UnknownTokenizerError: If the tokenizer reports failure.
    """
    if max_text_length is None:
        limit = config.max_text_length
    else:
        limit = _check_max_text_length(max_text_length)

    destination.clear()

    data = _encode(source)
    if not data:
        return

    if len(data) > limit:
        raise SourceTooLargeError(details={"limit": limit, "length": len(data)})
    source_len = to_c_int(len(data), SourceTooLargeError, limit=limit, length=len(data))

    while True:
        capacity = to_c_int(
            destination.capacity, DestinationTooLargeError, capacity=destination.capacity
        )
        signal = tokenizer(data, source_len, destination.storage, capacity)
        kind = classify_signal(signal, capacity)

        if kind is SignalKind.FAILURE:
            raise UnknownTokenizerError(original_code=signal, details={"signal": signal})

        if kind is SignalKind.NEEDS_CAPACITY:
            # Nothing was written; the tokenizer told us the exact size it needs.
            logger.debug(
                "Growing destination buffer",
                extra={"capacity": capacity, "required": signal},
            )
            destination.reserve_exact(signal)
            continue

        destination._assume_init(signal - 1)
        return
