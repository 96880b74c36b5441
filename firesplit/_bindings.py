"""
FFI bindings for the native tokenizer library.

Justification: Loads the shared library once, configures ctypes signatures
for the exported tokenizer functions, and provides the checked integer
narrowing used at every crossing into native code.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import platform
import threading
from pathlib import Path
from typing import Any

from ._logging import scoped_logger
from .config import C_INT_MAX, config
from .exceptions import FiresplitError, LibraryNotFoundError

__all__ = [
    "TokenizerFunc",
    "get_lib",
    "library_version",
    "to_c_int",
]

logger = scoped_logger("bindings")

# int fn(const char *src, int src_len, char *dst, int dst_cap)
TokenizerFunc = ctypes.CFUNCTYPE(
    ctypes.c_int,
    ctypes.c_char_p,
    ctypes.c_int,
    ctypes.POINTER(ctypes.c_char),
    ctypes.c_int,
)

_TOKENIZER_SYMBOLS = ("TextToWords", "TextToSentences")

_lib: ctypes.CDLL | None = None
_lib_lock = threading.Lock()


def to_c_int(value: int, error_cls: type[FiresplitError], **details: Any) -> int:
    """Narrow a Python int to the native int range, raising ``error_cls`` if it does not fit."""
    if 0 <= value <= C_INT_MAX:
        return value
    raise error_cls(details={**details, "value": value, "limit": C_INT_MAX})


def _get_lib_name() -> str:
    """Get platform-specific library name."""
    system = platform.system()
    if system == "Darwin":
        return "libblingfiretokdll.dylib"
    elif system == "Windows":
        return "blingfiretokdll.dll"
    else:
        return "libblingfiretokdll.so"


def _candidates() -> list[str]:
    """Library locations to try, in order."""
    if config.library_path:
        return [config.library_path]

    found = [str(Path(__file__).parent / _get_lib_name())]
    system_lib = ctypes.util.find_library("blingfiretokdll")
    if system_lib:
        found.append(system_lib)
    return found


def _configure(lib: ctypes.CDLL) -> None:
    """Set argtypes/restype on every exported function we call."""
    for name in _TOKENIZER_SYMBOLS:
        fn = getattr(lib, name)
        fn.argtypes = list(TokenizerFunc._argtypes_)
        fn.restype = ctypes.c_int

    # Older builds do not export the version query.
    if hasattr(lib, "GetBlingFireTokVersion"):
        lib.GetBlingFireTokVersion.argtypes = []
        lib.GetBlingFireTokVersion.restype = ctypes.c_int


def _load() -> ctypes.CDLL:
    searched = _candidates()
    errors: dict[str, str] = {}
    for candidate in searched:
        try:
            lib = ctypes.CDLL(candidate)
        except OSError as e:
            errors[candidate] = str(e)
            continue
        try:
            _configure(lib)
        except AttributeError as e:
            errors[candidate] = str(e)
            continue
        logger.debug("Loaded tokenizer library", extra={"library": candidate})
        return lib

    raise LibraryNotFoundError(
        "Unable to load the native tokenizer library. "
        "Set FIRESPLIT_LIBRARY to the path of libblingfiretokdll.",
        details={"searched": searched, "errors": errors},
    )


def get_lib() -> ctypes.CDLL:
    """
    Return the loaded native tokenizer library.

    The library is loaded on first use and cached for the life of the process.

    Raises
    ------
        LibraryNotFoundError: If no candidate library could be loaded.
    """
    global _lib
    if _lib is None:
        with _lib_lock:
            if _lib is None:
                _lib = _load()
    return _lib


def library_version() -> int | None:
    """Return the native library version, or None if the library does not report one."""
    lib = get_lib()
    if not hasattr(lib, "GetBlingFireTokVersion"):
        return None
    return lib.GetBlingFireTokVersion()
