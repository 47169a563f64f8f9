"""Off-axis relative illumination."""

import logging
import warnings
from typing import Tuple

import numpy as np

from ..errors import UnsupportedOffAxisMethod

__all__ = ["OFFAXIS_METHODS", "cos4th_factor", "apply_offaxis"]

logger = logging.getLogger(__name__)

OFFAXIS_METHODS = ("none", "skip", "", "cos4th")


def cos4th_factor(
    shape: Tuple[int, int],
    sample_spacing: float,
    image_distance: float,
) -> np.ndarray:
    """Relative illumination cos⁴θ for each image-plane sample.

    θ is the angle between the optical axis and the ray from the lens
    center to the sample, tan θ = r / image_distance, with r measured
    from the center pixel (rows // 2, cols // 2).

    Args:
        shape: Image shape (rows, cols).
        sample_spacing: Image-plane sample pitch (m).
        image_distance: Lens-to-image distance (m).

    Returns:
        (rows, cols) array, exactly 1.0 at the center pixel.
    """
    if sample_spacing <= 0 or image_distance <= 0:
        raise ValueError(
            f"Spacing and image distance must be positive, got "
            f"{sample_spacing} and {image_distance}"
        )
    rows, cols = shape
    y = (np.arange(rows) - rows // 2) * sample_spacing
    x = (np.arange(cols) - cols // 2) * sample_spacing
    xx, yy = np.meshgrid(x, y, indexing="xy")

    # cos θ = d / sqrt(d² + r²)
    r2 = xx**2 + yy**2
    d2 = image_distance**2
    cos2 = d2 / (d2 + r2)
    return cos2**2


def apply_offaxis(
    photons: np.ndarray,
    method: str,
    sample_spacing: float,
    image_distance: float,
) -> np.ndarray:
    """Apply the configured off-axis falloff to every wavelength plane.

    "none", "skip" and "" return `photons` unchanged. Unknown methods fall
    back to "cos4th" with an UnsupportedOffAxisMethod warning.
    """
    key = (method or "").lower()
    if key in ("none", "skip", ""):
        return photons
    if key != "cos4th":
        msg = f"Unknown off-axis method {method!r}; using cos4th instead"
        logger.warning(msg)
        warnings.warn(msg, UnsupportedOffAxisMethod, stacklevel=2)

    factor = cos4th_factor(photons.shape[:2], sample_spacing, image_distance)
    return photons * factor[:, :, np.newaxis]
