"""Spatial zero-padding of spectral cubes."""

import math
from typing import Optional, Tuple

import numpy as np

__all__ = ["default_padding", "pad_spatial", "crop_spatial"]


def default_padding(shape: Tuple[int, int]) -> Tuple[int, int]:
    """Padding added to each side of a (rows, cols) image: ceil(n / 8)."""
    rows, cols = shape
    return math.ceil(rows / 8), math.ceil(cols / 8)


def pad_spatial(
    cube: np.ndarray,
    padding: Optional[Tuple[int, int]] = None,
) -> np.ndarray:
    """Zero-pad the two spatial axes of a (rows, cols[, n_wave]) array.

    Args:
        cube: 2D image or 3D spectral cube.
        padding: Samples (rows, cols) added on each side. Defaults to
            default_padding(cube.shape[:2]).

    Returns:
        Padded array of shape (rows + 2 * pr, cols + 2 * pc[, n_wave]).

    Raises:
        ValueError: If a padding amount is negative.

    Example:
        >>> padded = pad_spatial(np.ones((64, 64, 31)))
        >>> padded.shape
        (80, 80, 31)
    """
    if padding is None:
        padding = default_padding(cube.shape[:2])
    pr, pc = (int(p) for p in padding)
    if pr < 0 or pc < 0:
        raise ValueError(f"Padding must be non-negative, got ({pr}, {pc})")

    pad_width = [(pr, pr), (pc, pc)] + [(0, 0)] * (cube.ndim - 2)
    return np.pad(cube, pad_width, mode="constant", constant_values=0)


def crop_spatial(cube: np.ndarray, padding: Tuple[int, int]) -> np.ndarray:
    """Remove `padding` samples from each side of the spatial axes."""
    pr, pc = padding
    rows, cols = cube.shape[:2]
    if 2 * pr >= rows or 2 * pc >= cols:
        raise ValueError(
            f"Padding ({pr}, {pc}) leaves nothing of a {rows}x{cols} image"
        )
    return cube[pr : rows - pr, pc : cols - pc, ...]
