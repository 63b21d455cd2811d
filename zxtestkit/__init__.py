"""Helpers for regression-testing a ZX Spectrum emulator: palette, frame buffer, debug port, assets, fingerprints and asset builds."""

__version__ = "0.16.0"
__all__ = ["__version__"]