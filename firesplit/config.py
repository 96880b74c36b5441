"""
Runtime configuration.

Settings are read from the environment once at import and can be modified
programmatically afterwards.

Example:
    >>> from firesplit import config
    >>> config.library_path = "/opt/blingfire/libblingfiretokdll.so"
    >>> config.max_text_length = 1 << 20  # Reject inputs over 1 MiB

Environment::

    FIRESPLIT_LIBRARY=/path/to/libblingfiretokdll.so
    FIRESPLIT_MAX_TEXT_LENGTH=<bytes> (default: MAX_TEXT_LENGTH)
"""

from __future__ import annotations

import os

from ._logging import scoped_logger
from .exceptions import ValidationError

__all__ = ["C_INT_MAX", "MAX_TEXT_LENGTH", "config"]

logger = scoped_logger("config")

# Largest value representable by the native int used for lengths and signals.
C_INT_MAX = 2**31 - 1

# Every input byte may become two output bytes, plus one terminator.
MAX_TEXT_LENGTH = (C_INT_MAX - 1) // 2


def _check_max_text_length(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"max_text_length must be int, got {type(value).__name__}",
            details={"param": "max_text_length", "type": type(value).__name__},
        )
    if not 0 < value <= MAX_TEXT_LENGTH:
        raise ValidationError(
            f"max_text_length must be between 1 and {MAX_TEXT_LENGTH}, got {value}",
            details={"param": "max_text_length", "value": value, "limit": MAX_TEXT_LENGTH},
        )
    return value


def _env_max_text_length() -> int:
    raw = os.environ.get("FIRESPLIT_MAX_TEXT_LENGTH")
    if not raw:
        return MAX_TEXT_LENGTH
    try:
        return _check_max_text_length(int(raw))
    except (ValueError, ValidationError):
        logger.warning(
            "Ignoring invalid FIRESPLIT_MAX_TEXT_LENGTH",
            extra={"value": raw, "default": MAX_TEXT_LENGTH},
        )
        return MAX_TEXT_LENGTH


class _FiresplitConfig:
    """
    Singleton configuration for firesplit.

    This is a singleton - import and modify `config` directly:

        from firesplit import config
        config.max_text_length = 4096

    Attributes
    ----------
        library_path: Explicit path to the native tokenizer library, or None
            to search the package directory and the system library path.
        max_text_length: Default source length limit in bytes, applied when
            a call does not pass its own limit.
    """

    __slots__ = ("_library_path", "_max_text_length")

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restore the environment-derived defaults."""
        self._library_path = os.environ.get("FIRESPLIT_LIBRARY") or None
        self._max_text_length = _env_max_text_length()

    @property
    def library_path(self) -> str | None:
        """Path to the native tokenizer library (None to search)."""
        return self._library_path

    @library_path.setter
    def library_path(self, value: str | os.PathLike | None) -> None:
        if value is not None and not isinstance(value, (str, os.PathLike)):
            raise ValidationError(
                f"library_path must be str, PathLike or None, got {type(value).__name__}",
                details={"param": "library_path", "type": type(value).__name__},
            )
        self._library_path = os.fspath(value) if value is not None else None

    @property
    def max_text_length(self) -> int:
        """Default maximum source length in bytes."""
        return self._max_text_length

    @max_text_length.setter
    def max_text_length(self, value: int) -> None:
        self._max_text_length = _check_max_text_length(value)

    def __repr__(self) -> str:
        return (
            f"FiresplitConfig(library_path={self._library_path!r}, "
            f"max_text_length={self._max_text_length})"
        )


# Module-level singleton
config = _FiresplitConfig()
