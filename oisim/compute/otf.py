"""Diffraction-limited optical transfer function.

The incoherent OTF of an aberration-free circular pupil is real and
rotationally symmetric. With cutoff fc = 1 / (λN) and s = f / fc:

    MTF(s) = (2/π) (arccos s - s √(1 - s²)),   s ≤ 1
    MTF(s) = 0,                                 s > 1

Image planes are filtered independently, one per wavelength.

References:
    Goodman, J.W. "Introduction to Fourier Optics", 3rd ed., §6.3.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidOpticsConfiguration
from ..utils.fourier import frequency_support

__all__ = ["dl_mtf", "dl_mtf_2d", "apply_otf", "dl_psf"]

logger = logging.getLogger(__name__)


def dl_mtf(frequency: np.ndarray, wavelength: float, f_number: float) -> np.ndarray:
    """Diffraction-limited MTF at radial spatial frequencies.

    Args:
        frequency: Radial frequency (cycles/m), any shape. Sign is ignored.
        wavelength: Wavelength (nm).
        f_number: Lens f-number.

    Returns:
        MTF values in [0, 1], same shape as `frequency`. MTF(0) == 1.
    """
    if not f_number > 0:
        raise InvalidOpticsConfiguration(f"f-number must be positive, got {f_number}")
    fc = 1.0 / (wavelength * 1e-9 * f_number)
    s = np.abs(np.asarray(frequency, dtype=float)) / fc

    mtf = np.zeros_like(s)
    inside = s < 1.0
    si = s[inside]
    mtf[inside] = 2.0 * (np.arccos(si) - si * np.sqrt(1.0 - si**2)) / np.pi
    return mtf


def dl_mtf_2d(
    shape: Tuple[int, int],
    sample_spacing: float,
    wavelength: float,
    f_number: float,
    centered: bool = False,
) -> np.ndarray:
    """Sample the diffraction-limited MTF on the image's frequency grid.

    Args:
        shape: Image shape (rows, cols).
        sample_spacing: Image-plane sample pitch (m).
        wavelength: Wavelength (nm).
        f_number: Lens f-number.
        centered: If True, zero frequency at (rows // 2, cols // 2);
            otherwise in numpy.fft order with DC at (0, 0).

    Returns:
        (rows, cols) real MTF.
    """
    fx, fy = frequency_support(shape, sample_spacing)
    fxx, fyy = np.meshgrid(fx, fy, indexing="xy")
    mtf = dl_mtf(np.sqrt(fxx**2 + fyy**2), wavelength, f_number)
    if centered:
        return mtf
    return np.fft.ifftshift(mtf)


def _filter_plane(plane: np.ndarray, mtf: np.ndarray) -> np.ndarray:
    filtered = np.real(np.fft.ifft2(np.fft.fft2(plane) * mtf))
    # Ringing from the truncated spectrum can dip below zero
    return np.maximum(filtered, 0.0)


def apply_otf(
    photons: np.ndarray,
    wavelengths: Sequence[float],
    f_number: float,
    sample_spacing: float,
    max_workers: Optional[int] = None,
) -> np.ndarray:
    """Blur each wavelength plane with the diffraction-limited OTF.

    The zero-frequency gain is 1, so the sum of each plane is preserved
    apart from clamped negative ringing. Ringing appears when the cutoff
    1/(λN) lies above the Nyquist frequency 1/(2 * sample_spacing): the
    MTF is then truncated at the grid edge, and clamping can add a few
    percent to the sum of a sharp plane. Boundaries are periodic; the
    zero-padding added by the irradiance stage keeps blur from wrapping
    into the scene.

    Args:
        photons: Irradiance cube (rows, cols, n_wave).
        wavelengths: Wavelength (nm) of each plane.
        f_number: Lens f-number.
        sample_spacing: Image-plane sample pitch (m).
        max_workers: If greater than 1, planes are filtered on a thread
            pool of this size.

    Returns:
        Blurred, non-negative cube with the shape of `photons`.

    Example:
        >>> blurred = apply_otf(photons, grid.wave, f_number=4.0, sample_spacing=1e-6)
    """
    wavelengths = np.atleast_1d(np.asarray(wavelengths, dtype=float))
    if photons.ndim != 3 or photons.shape[2] != wavelengths.size:
        raise ValueError(
            f"Photons shape {photons.shape} does not match "
            f"{wavelengths.size} wavelengths"
        )

    shape = photons.shape[:2]
    mtfs = [dl_mtf_2d(shape, sample_spacing, w, f_number) for w in wavelengths]
    planes = [photons[:, :, i] for i in range(wavelengths.size)]

    if max_workers is not None and max_workers > 1 and len(planes) > 1:
        logger.debug("Filtering %d planes on %d threads", len(planes), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            filtered = list(pool.map(_filter_plane, planes, mtfs))
    else:
        filtered = [_filter_plane(p, m) for p, m in zip(planes, mtfs)]

    return np.stack(filtered, axis=-1)


def dl_psf(
    shape: Tuple[int, int],
    sample_spacing: float,
    wavelength: float,
    f_number: float,
) -> np.ndarray:
    """Diffraction-limited point spread function (Airy pattern).

    Computed as the inverse transform of the sampled MTF, so it is exactly
    the kernel apply_otf() convolves with.

    Returns:
        (rows, cols) PSF summing to 1, peak at (rows // 2, cols // 2).
    """
    mtf = dl_mtf_2d(shape, sample_spacing, wavelength, f_number)
    psf = np.maximum(np.real(np.fft.ifft2(mtf)), 0.0)
    psf = np.fft.fftshift(psf)
    total = psf.sum()
    if total > 0:
        psf = psf / total
    return psf
