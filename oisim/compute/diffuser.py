"""Diffusers placed behind the lens.

Two models are available: an isotropic Gaussian blur and a birefringent
anti-aliasing filter that splits each point into four displaced copies.
"""

import logging
import warnings
from typing import Optional

import numpy as np
from scipy.ndimage import gaussian_filter, shift

from ..errors import UnsupportedDiffuserMethod

__all__ = ["DIFFUSER_METHODS", "gaussian_diffuser", "birefringent_diffuser", "apply_diffuser"]

logger = logging.getLogger(__name__)

DIFFUSER_METHODS = ("skip", "blur", "birefringent")


def gaussian_diffuser(photons: np.ndarray, sigma: float, sample_spacing: float) -> np.ndarray:
    """Gaussian blur of each wavelength plane.

    Args:
        photons: Irradiance cube (rows, cols, n_wave).
        sigma: Standard deviation of the blur (m).
        sample_spacing: Image-plane sample pitch (m).

    Returns:
        Blurred cube. Boundaries wrap, so the plane sums are preserved.
    """
    sigma_px = sigma / sample_spacing
    if sigma_px <= 0:
        return photons
    # sigma 0 on the wavelength axis keeps planes independent
    return gaussian_filter(photons, sigma=(sigma_px, sigma_px, 0.0), mode="wrap")


def birefringent_diffuser(
    photons: np.ndarray,
    sample_spacing: float,
    displacement: Optional[float] = None,
) -> np.ndarray:
    """Four-spot birefringent filter.

    Each plane is replaced by the mean of four copies shifted by
    (±d/2, ±d/2), the pattern produced by two crossed birefringent plates.
    Copies are shifted with bilinear weights and periodic boundaries, so
    every plane keeps its sum and stays non-negative.

    Args:
        photons: Irradiance cube (rows, cols, n_wave).
        sample_spacing: Image-plane sample pitch (m).
        displacement: Spot separation d (m). Defaults to one sample.

    Returns:
        Filtered cube with the shape of `photons`.
    """
    half = 0.5 if displacement is None else 0.5 * displacement / sample_spacing
    out = np.zeros_like(photons, dtype=float)
    for dy in (-half, half):
        for dx in (-half, half):
            # zero shift on the wavelength axis
            out += shift(photons, (dy, dx, 0.0), order=1, mode="grid-wrap")
    return out / 4.0


def apply_diffuser(
    photons: np.ndarray,
    method: str,
    blur: Optional[float],
    sample_spacing: float,
) -> np.ndarray:
    """Apply the configured diffuser.

    "skip" returns `photons` unchanged, as does "blur" without a blur
    size. Unknown methods are reported with an UnsupportedDiffuserMethod
    warning and no diffuser is applied.
    """
    key = (method or "skip").lower()
    if key == "skip":
        return photons
    if key == "blur":
        if blur is None:
            logger.debug("Diffuser blur not set; skipping diffuser")
            return photons
        return gaussian_diffuser(photons, blur, sample_spacing)
    if key == "birefringent":
        return birefringent_diffuser(photons, sample_spacing, blur)

    msg = f"Unknown diffuser method {method!r}; no diffuser applied"
    logger.warning(msg)
    warnings.warn(msg, UnsupportedDiffuserMethod, stacklevel=2)
    return photons
