"""Whole-file loading with a NUL sentinel appended after the content.

Three entry points share the same open/measure/fill steps:

* ``load_file`` keeps the two-phase calling convention: call it without a
  destination to learn the capacity needed (content size plus the sentinel),
  then again with a buffer of at least that size to fill it. Failures are
  logged and reported as ``-1``.
* ``measure`` / ``read_into`` are the same two phases raising
  :class:`FileLoadError` subclasses instead of returning ``-1``.
* ``load_bytes`` opens the file once and returns an owned ``bytes`` object,
  so there is no caller sizing and no window between measuring and reading.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Union

logger = logging.getLogger(__name__)

# Content size plus the sentinel must fit a signed 32-bit count.
MAX_FILE_SIZE = 2**31 - 2
SENTINEL = 0

PathLike = Union[str, "os.PathLike[str]"]


class FileLoadError(RuntimeError):
    """Raised when a file cannot be loaded into memory."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"unable to read file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class FileOpenFailure(FileLoadError):
    """The file is missing, unreadable, or not a regular file."""


class FileSeekFailure(FileLoadError):
    """Seeking failed while measuring or rewinding the file."""


class FileReadShortfall(FileLoadError):
    """Fewer bytes were read than the measured file size."""


class FileTooLargeError(FileLoadError):
    """The file exceeds the configured maximum size."""


class BufferTooSmallError(ValueError):
    """The destination buffer cannot hold the content plus the sentinel."""

    def __init__(self, path: PathLike, required: int, capacity: int) -> None:
        super().__init__(
            f"destination holds {capacity} bytes but {path} needs {required}"
        )
        self.path = Path(path)
        self.required = required
        self.capacity = capacity


@contextmanager
def _open(path: Path) -> Iterator[BinaryIO]:
    try:
        st = os.stat(path)
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise FileOpenFailure(path, reason) from exc
    if stat.S_ISDIR(st.st_mode):
        raise FileOpenFailure(path, "is a directory")
    if not stat.S_ISREG(st.st_mode):
        raise FileOpenFailure(path, "not a regular file")
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise FileOpenFailure(path, exc.strerror or str(exc)) from exc

    try:
        yield handle
    finally:
        try:
            handle.close()
        except OSError as exc:
            # Content already read is still valid.
            logger.warning("unable to close file %s (%s)", path, exc)


def _content_size(handle: BinaryIO, path: Path, max_size: int) -> int:
    try:
        size = handle.seek(0, os.SEEK_END)
    except OSError as exc:
        raise FileSeekFailure(path, f"seek to end failed ({exc})") from exc

    if size < 0:
        raise FileSeekFailure(path, f"reported negative size {size}")
    if size > max_size:
        raise FileTooLargeError(path, f"{size} bytes exceeds limit of {max_size}")
    return size


def _fill(handle: BinaryIO, path: Path, size: int, dest: memoryview) -> int:
    if size:
        try:
            handle.seek(0, os.SEEK_SET)
        except OSError as exc:
            raise FileSeekFailure(path, f"rewind failed ({exc})") from exc

        filled = 0
        while filled < size:
            count = handle.readinto(dest[filled:size])
            if not count:
                break
            filled += count
        if filled != size:
            raise FileReadShortfall(path, f"read {filled} of {size} bytes")

    dest[size] = SENTINEL
    return size + 1


def _writable_view(buffer: object) -> memoryview:
    try:
        view = memoryview(buffer).cast("B")  # type: ignore[arg-type]
    except TypeError as exc:
        raise TypeError(f"Expected a writable buffer, got {type(buffer).__name__}") from exc
    if view.readonly:
        raise TypeError(f"Expected a writable buffer, got read-only {type(buffer).__name__}")
    return view


def measure(path: PathLike, *, max_size: int = MAX_FILE_SIZE) -> int:
    """Return the capacity needed to load `path`: its size plus one sentinel byte."""

    resolved = Path(path)
    with _open(resolved) as handle:
        return _content_size(handle, resolved, max_size) + 1


def read_into(path: PathLike, buffer: bytearray | memoryview, *, max_size: int = MAX_FILE_SIZE) -> int:
    """Copy the content of `path` into `buffer` followed by a NUL byte.

    Returns the number of bytes written including the sentinel. The buffer is
    left untouched when it is too small.
    """

    resolved = Path(path)
    view = _writable_view(buffer)
    with _open(resolved) as handle:
        size = _content_size(handle, resolved, max_size)
        if len(view) < size + 1:
            raise BufferTooSmallError(resolved, size + 1, len(view))
        return _fill(handle, resolved, size, view)


def load_bytes(path: PathLike, *, max_size: int = MAX_FILE_SIZE) -> bytes:
    """Return the content of `path` with a trailing NUL byte, using one open handle."""

    resolved = Path(path)
    with _open(resolved) as handle:
        size = _content_size(handle, resolved, max_size)
        buffer = bytearray(size + 1)
        _fill(handle, resolved, size, memoryview(buffer))
    logger.debug("Loaded %s (%d bytes)", resolved, size)
    return bytes(buffer)


def load_file(
    path: PathLike,
    out: bytearray | memoryview | None = None,
    *,
    max_size: int = MAX_FILE_SIZE,
) -> int:
    """Two-phase loader returning a byte count, or ``-1`` on failure.

    With ``out`` as ``None`` return the size needed to hold the whole file
    including the NUL terminator. Otherwise write the contents to ``out`` and
    return how many bytes were written, including the terminator.

    I/O failures are logged and never raised. An undersized ``out`` raises
    :class:`BufferTooSmallError`.
    """

    try:
        if out is None:
            return measure(path, max_size=max_size)
        return read_into(path, out, max_size=max_size)
    except FileLoadError as exc:
        logger.error("unable to read file %s (%s)", exc.path, exc.reason)
        return -1


__all__ = [
    "BufferTooSmallError",
    "FileLoadError",
    "FileOpenFailure",
    "FileReadShortfall",
    "FileSeekFailure",
    "FileTooLargeError",
    "MAX_FILE_SIZE",
    "SENTINEL",
    "load_bytes",
    "load_file",
    "measure",
    "read_into",
]
