"""Scene radiance to image-plane irradiance.

For a lens of f-number N imaging at magnification m, the on-axis image
irradiance of a Lambertian scene is

    E = L * π / (4 N² (1 + |m|)²)

The cos⁴ dependence on field angle is left to the off-axis falloff stage,
where it equals 1 on the optical axis.
"""

from typing import Optional, Tuple

import numpy as np

from ..errors import EmptyInputError, InvalidOpticsConfiguration
from ..utils.padding import default_padding, pad_spatial

__all__ = ["irradiance_scale", "compute_irradiance"]


def irradiance_scale(f_number: float, magnification: float = 0.0) -> float:
    """Radiance-to-irradiance factor π / (4 N² (1 + |m|)²).

    Raises:
        InvalidOpticsConfiguration: If f_number is not positive.
    """
    if not f_number > 0:
        raise InvalidOpticsConfiguration(f"f-number must be positive, got {f_number}")
    return np.pi / (4.0 * f_number**2 * (1.0 + abs(magnification)) ** 2)


def compute_irradiance(
    radiance: np.ndarray,
    f_number: float,
    magnification: float = 0.0,
    transmittance: Optional[np.ndarray] = None,
    padding: Optional[Tuple[int, int]] = None,
) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Convert a radiance cube into a zero-padded irradiance cube.

    Args:
        radiance: Spectral radiance (rows, cols, n_wave).
        f_number: Lens f-number.
        magnification: Lateral magnification; ~0 for distant scenes.
        transmittance: Optional per-wavelength lens transmittance (n_wave,).
        padding: Zero border (rows, cols) added on each side. Defaults to
            ceil(n / 8) per axis.

    Returns:
        Tuple (photons, padding) with photons of shape
        (rows + 2 * pr, cols + 2 * pc, n_wave).

    Example:
        >>> photons, pad = compute_irradiance(np.ones((64, 64, 1)), f_number=4.0)
        >>> photons.shape, pad
        ((80, 80, 1), (8, 8))
    """
    radiance = np.asarray(radiance, dtype=float)
    if radiance.size == 0:
        raise EmptyInputError(f"Radiance cube is empty, shape {radiance.shape}")
    if radiance.ndim != 3:
        raise ValueError(f"Radiance must be (rows, cols, n_wave), got {radiance.shape}")

    scale = irradiance_scale(f_number, magnification)
    irradiance = radiance * scale
    if transmittance is not None:
        transmittance = np.asarray(transmittance, dtype=float).ravel()
        if transmittance.size != radiance.shape[2]:
            raise ValueError(
                f"Transmittance has {transmittance.size} samples, "
                f"radiance has {radiance.shape[2]} planes"
            )
        irradiance = irradiance * transmittance[np.newaxis, np.newaxis, :]

    if padding is None:
        padding = default_padding(radiance.shape[:2])
    return pad_spatial(irradiance, padding), tuple(int(p) for p in padding)
