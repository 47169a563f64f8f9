"""Photometric illuminance of a spectral irradiance cube."""

from typing import Tuple, Union

import numpy as np

from ..core.constants import (
    LUMINOUS_EFFICACY,
    PHOTOPIC_VALUES,
    PHOTOPIC_WAVE,
    PLANCK,
    SPEED_OF_LIGHT,
)
from ..core.spectrum import WavelengthGrid, as_wavelength_grid

__all__ = ["photons_to_energy", "photopic_luminosity", "compute_illuminance"]


def photons_to_energy(photons: np.ndarray, wave: np.ndarray) -> np.ndarray:
    """Convert photon flux to energy flux along the last axis.

    Args:
        photons: Photon counts with wavelength on the last axis.
        wave: Wavelengths (nm).

    Returns:
        photons * h c / λ, in the same spatial/spectral units per joule.
    """
    wave_m = np.asarray(wave, dtype=float) * 1e-9
    return np.asarray(photons, dtype=float) * (PLANCK * SPEED_OF_LIGHT / wave_m)


def photopic_luminosity(wave: np.ndarray) -> np.ndarray:
    """CIE photopic V(λ) at `wave` (nm); zero outside 380-780 nm."""
    return np.interp(np.asarray(wave, dtype=float), PHOTOPIC_WAVE, PHOTOPIC_VALUES, left=0.0, right=0.0)


def compute_illuminance(
    photons: np.ndarray,
    wavelengths: Union[WavelengthGrid, np.ndarray],
) -> Tuple[np.ndarray, float]:
    """Illuminance (lux) of a spectral irradiance cube.

        E_v = 683 * Δλ * Σ_λ E(λ) V(λ)

    Args:
        photons: Irradiance (rows, cols, n_wave) in photons/(s m² nm).
        wavelengths: Grid of the last axis.

    Returns:
        Tuple (illuminance map, mean illuminance).
    """
    grid = as_wavelength_grid(wavelengths)
    photons = np.asarray(photons, dtype=float)
    if photons.shape[-1] != grid.n_wave:
        raise ValueError(
            f"Photons have {photons.shape[-1]} planes, grid has {grid.n_wave}"
        )

    energy = photons_to_energy(photons, grid.wave)
    weights = photopic_luminosity(grid.wave) * grid.bin_width * LUMINOUS_EFFICACY
    illuminance = np.maximum(energy @ weights, 0.0)
    mean = float(np.mean(illuminance)) if illuminance.size else 0.0
    return illuminance, mean
