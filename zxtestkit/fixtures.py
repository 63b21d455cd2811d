"""Helpers for comparing emulator output against stored fingerprints."""

from __future__ import annotations

import base64
import hashlib
import io
import logging
import math
import sys
import wave
from array import array
from pathlib import Path, PurePath
from typing import Iterable

_log = logging.getLogger(__name__)

DEFAULT_SOUND_SAMPLE_RATE = 44100
_I16_MAX = 32767
_I16_MIN = -32768


def fingerprint(data: bytes) -> str:
    """Return the base64-encoded SHA-256 digest of ``data``."""
    return base64.b64encode(hashlib.sha256(data).digest()).decode("ascii")


def _with_extension(name: str | PurePath, extension: str) -> Path:
    return Path(name).with_suffix("." + extension)


def screen_filename(name: str | PurePath) -> Path:
    return _with_extension(name, "screen.png")


def border_filename(name: str | PurePath) -> Path:
    return _with_extension(name, "border.png")


def sound_filename(name: str | PurePath) -> Path:
    return _with_extension(name, "wav")


def text_filename(name: str | PurePath) -> Path:
    return _with_extension(name, "txt")


def normalize_sample(sample: float) -> int:
    """Scale a sample in [-1, 1] to a 16-bit integer, saturating out of range."""
    if math.isnan(sample):
        return 0
    scaled = sample * _I16_MAX
    if scaled >= _I16_MAX:
        return _I16_MAX
    if scaled <= _I16_MIN:
        return _I16_MIN
    return int(scaled)


def wav_bytes(
    samples: Iterable[int],
    sample_rate: int = DEFAULT_SOUND_SAMPLE_RATE,
    channels: int = 2,
) -> bytes:
    """Encode interleaved 16-bit samples as a PCM WAV file."""
    pcm = array("h", samples)
    if sys.byteorder == "big":
        pcm.byteswap()
    out = io.BytesIO()
    with wave.open(out, "wb") as writer:
        writer.setnchannels(channels)
        writer.setsampwidth(2)
        writer.setframerate(sample_rate)
        writer.writeframes(pcm.tobytes())
    return out.getvalue()


def save_actual_data(folder: str | PurePath, filename: str | PurePath, data: bytes) -> Path:
    """Write ``data`` to ``folder/filename``, creating the folder, and return the path."""
    directory = Path(folder)
    path = directory / filename
    _log.info("Saving actual test data file %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path