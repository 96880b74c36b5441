"""
Reusable destination buffer for native tokenizer output.

Provides TextBuffer, an owned, growable byte store that is lent to the native
function for the duration of one call and then holds its output.
"""

from __future__ import annotations

import ctypes

__all__ = ["TextBuffer"]


class TextBuffer:
    """
    Growable byte buffer that receives tokenizer output.

    A TextBuffer tracks two quantities: ``capacity`` (bytes allocated) and
    ``len()`` (bytes of valid content). Reuse one buffer across calls to
    avoid reallocating: each call clears the content but keeps the storage.

    A buffer must not be shared between threads while a call is in progress.

    Example:
        >>> buf = TextBuffer(256)
        >>> text_to_words("Hello, world!", buf)
        >>> str(buf)
        'Hello , world !'
        >>> buf.capacity
        256
    """

    __slots__ = ("_storage", "_native", "_length")

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._allocate(bytearray(capacity))
        self._length = 0

    def _allocate(self, storage: bytearray) -> None:
        self._storage = storage
        # Shares memory with the bytearray; no copy.
        self._native = (ctypes.c_char * len(storage)).from_buffer(storage)

    @classmethod
    def from_text(cls, text: str | bytes) -> TextBuffer:
        """Create a buffer holding ``text``, with capacity equal to its encoded length."""
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        buf = cls()
        buf._allocate(bytearray(data))
        buf._length = len(data)
        return buf

    @property
    def capacity(self) -> int:
        """Number of bytes allocated."""
        return len(self._storage)

    @property
    def storage(self) -> ctypes.Array:
        """Raw storage handed to the native function."""
        return self._native

    def __len__(self) -> int:
        return self._length

    def clear(self) -> None:
        """Discard the content, keeping the allocation."""
        self._length = 0

    def reserve_exact(self, capacity: int) -> None:
        """
        Ensure at least ``capacity`` bytes are allocated, with no over-allocation.

        Only valid on an empty buffer: growing replaces the storage and the
        old bytes are not carried over.
        """
        if self._length:
            raise ValueError("reserve_exact() requires an empty buffer")
        if capacity > len(self._storage):
            self._allocate(bytearray(capacity))

    def _assume_init(self, length: int) -> None:
        """
        Mark the first ``length`` bytes of storage as content.

        This is the one place where bytes written by native code become
        visible. The bytes are neither copied nor validated as UTF-8: the
        tokenizer only produces valid UTF-8 from valid UTF-8 input.
        """
        if not 0 <= length <= len(self._storage):
            raise ValueError(
                f"content length {length} outside storage of {len(self._storage)} bytes"
            )
        self._length = length

    def view(self) -> memoryview:
        """Zero-copy, read-only view of the content bytes."""
        return memoryview(self._storage)[: self._length].toreadonly()

    def to_bytes(self) -> bytes:
        """Copy of the content bytes."""
        return bytes(memoryview(self._storage)[: self._length])

    @property
    def text(self) -> str:
        """Content decoded as UTF-8."""
        return str(memoryview(self._storage)[: self._length], "utf-8")

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextBuffer):
            return self.to_bytes() == other.to_bytes()
        if isinstance(other, str):
            return self.text == other
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.to_bytes() == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        # Content may not be valid UTF-8.
        text = str(memoryview(self._storage)[: self._length], "utf-8", "replace")
        return f"TextBuffer(len={self._length}, capacity={self.capacity}, text={text!r})"
