"""Centered frequency axes of FFT-sampled images."""

from typing import Sequence, Tuple

import numpy as np
from numpy.fft import fftfreq, fftshift

__all__ = ["centered_frequencies", "frequency_support"]


def centered_frequencies(n: int, spacing: float = 1.0) -> np.ndarray:
    """1D frequency samples with zero frequency at index n // 2.

    Args:
        n: Number of samples.
        spacing: Real-space sample spacing.

    Returns:
        Frequencies in cycles per unit of `spacing`, ascending, e.g.
        [-4, -3, ..., 3] / (8 * spacing) for n = 8.
    """
    return fftshift(fftfreq(n, d=spacing))


def frequency_support(
    shape: Tuple[int, int],
    spacing: float | Sequence[float],
) -> Tuple[np.ndarray, np.ndarray]:
    """Centered frequency axes of a 2D (rows, cols) image.

    Zero frequency sits at (rows // 2, cols // 2), the same position
    numpy.fft.fftshift moves the DC term to.

    Args:
        shape: Image shape (rows, cols).
        spacing: Sample spacing, scalar or (dy, dx).

    Returns:
        Tuple (fx, fy) of 1D arrays with cols and rows entries.
    """
    if isinstance(spacing, (int, float)):
        dy = dx = float(spacing)
    else:
        dy, dx = spacing
    if dy <= 0 or dx <= 0:
        raise ValueError(f"Spacing must be positive, got ({dy}, {dx})")

    rows, cols = shape
    return centered_frequencies(cols, dx), centered_frequencies(rows, dy)
