"""The standard ZX Spectrum colour palette."""

from __future__ import annotations


def _rgba(value: int) -> tuple[int, int, int, int]:
    return tuple(value.to_bytes(4, "big"))  # type: ignore[return-value]


ORIGINAL: tuple[tuple[int, int, int, int], ...] = tuple(
    _rgba(value)
    for value in (
        # normal
        0x000000FF,
        0x0000CDFF,
        0xCD0000FF,
        0xCD00CDFF,
        0x00CD00FF,
        0x00CDCDFF,
        0xCDCD00FF,
        0xCDCDCDFF,
        # bright
        0x000000FF,
        0x0000FFFF,
        0xFF0000FF,
        0xFF00FFFF,
        0x00FF00FF,
        0x00FFFFFF,
        0xFFFF00FF,
        0xFFFFFFFF,
    )
)
"""Sixteen RGBA colours: eight normal ones followed by their bright variants."""


def png_palette() -> bytes:
    """Return the palette as packed RGB triples, ready for a PNG PLTE chunk."""
    return b"".join(bytes(color[:3]) for color in ORIGINAL)