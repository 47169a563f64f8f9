"""Fourier, padding and unit helpers."""

from .fourier import centered_frequencies, frequency_support
from .padding import default_padding, pad_spatial, crop_spatial
from .units import LENGTH_UNITS, convert

__all__ = [
    # Frequency axes
    "centered_frequencies",
    "frequency_support",
    # Padding
    "default_padding",
    "pad_spatial",
    "crop_spatial",
    # Units
    "LENGTH_UNITS",
    "convert",
]
