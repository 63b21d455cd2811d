"""Readable, seekable and writable assets backed by memory, files or gzip data."""

from __future__ import annotations

import gzip
import logging
import os
from enum import IntEnum
from typing import BinaryIO, Protocol

_log = logging.getLogger(__name__)


class AssetError(OSError):
    """Raised when the host-side implementation of an asset fails."""


class SeekFrom(IntEnum):
    """Reference point for a seek."""

    START = os.SEEK_SET
    CURRENT = os.SEEK_CUR
    END = os.SEEK_END


class _LoadableAsset(Protocol):
    def read(self, size: int) -> bytes: ...

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.START) -> int: ...


class _DataRecorder(Protocol):
    def write(self, data: bytes) -> int: ...


class BufferCursor:
    """An in-memory asset with a read position."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)
        self._position = 0

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the current position."""
        if size < 0:
            raise AssetError("Read size must not be negative")
        chunk = self._data[self._position : self._position + size]
        self._position += len(chunk)
        return chunk

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.START) -> int:
        """Move the position and return it, counted from the start."""
        base = {
            SeekFrom.START: 0,
            SeekFrom.CURRENT: self._position,
            SeekFrom.END: len(self._data),
        }[SeekFrom(whence)]
        target = base + offset
        if target < 0:
            raise AssetError("Seek to a negative position")
        self._position = target
        return target

    def into_bytes(self) -> bytes:
        """Return the whole underlying buffer."""
        return self._data


class FileAsset:
    """An asset backed by an open binary file."""

    def __init__(self, file: BinaryIO) -> None:
        self._file = file

    def read(self, size: int) -> bytes:
        try:
            return self._file.read(size)
        except (OSError, ValueError) as exc:
            _log.error("Failed to read asset: %s", exc)
            raise AssetError("Failed to read asset") from exc

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.START) -> int:
        try:
            return self._file.seek(offset, int(whence))
        except (OSError, ValueError) as exc:
            _log.error("Failed to seek asset: %s", exc)
            raise AssetError("Failed to seek asset") from exc

    def write(self, data: bytes) -> int:
        try:
            return self._file.write(data)
        except (OSError, ValueError) as exc:
            _log.error("Failed to write data to file: %s", exc)
            raise AssetError("Failed to write data to file") from exc


class GzipAsset:
    """A gzip-compressed asset, unpacked into memory on creation."""

    def __init__(self, file: BinaryIO) -> None:
        # ZX Spectrum assets are small enough to keep unpacked in memory
        with gzip.GzipFile(fileobj=file, mode="rb") as decoder:
            self._buffer = BufferCursor(decoder.read())

    def read(self, size: int) -> bytes:
        return self._buffer.read(size)

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.START) -> int:
        return self._buffer.seek(offset, whence)

    def into_bytes(self) -> bytes:
        """Return the decompressed content."""
        return self._buffer.into_bytes()


class DynamicAsset:
    """Wraps any readable and seekable asset behind one interface."""

    def __init__(self, inner: _LoadableAsset) -> None:
        self._inner = inner

    def read(self, size: int) -> bytes:
        return self._inner.read(size)

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.START) -> int:
        return self._inner.seek(offset, whence)


class DynamicDataRecorder:
    """Wraps any writable recorder behind one interface."""

    def __init__(self, inner: _DataRecorder) -> None:
        self._inner = inner

    def write(self, data: bytes) -> int:
        return self._inner.write(data)