"""oisim - Optical image formation for diffraction-limited lenses.

Turns a scene's spectral radiance into the spectral irradiance and
illuminance at the sensor plane of a camera.

The library is organized into three modules:

- **core**: Scene, Optics and OpticalImage data structures and the
  wavelength grid they share
- **compute**: the formation stages (irradiance, off-axis falloff,
  diffraction-limited OTF, diffuser, illuminance) and the pipeline that
  runs them
- **utils**: Fourier, padding and unit helpers

Example:
    >>> import numpy as np
    >>> from oisim import Scene, Optics, OpticalImage, compute_optical_image
    >>>
    >>> scene = Scene(
    ...     radiance=np.full((64, 64, 31), 1e16),  # photons/(s sr m² nm)
    ...     wavelengths=np.arange(400, 701, 10),   # nm
    ...     fov=10.0,                              # degrees
    ... )
    >>> optics = Optics(f_number=4.0, focal_length=0.05)
    >>> oi = compute_optical_image(scene, OpticalImage(optics))
    >>> oi.photons.shape
    (80, 80, 31)

Reference:
    Goodman, J.W. "Introduction to Fourier Optics", 3rd ed. (2005).
"""

__version__ = "0.1.0"

# =============================================================================
# Core data structures
# =============================================================================
from .core import (
    WavelengthGrid,
    resample_spectrum,
    Optics,
    Scene,
    OpticalImage,
)

# =============================================================================
# Formation stages
# =============================================================================
from .compute import (
    compute_optical_image,
    compute_irradiance,
    irradiance_scale,
    cos4th_factor,
    apply_offaxis,
    dl_mtf,
    dl_mtf_2d,
    apply_otf,
    dl_psf,
    gaussian_diffuser,
    birefringent_diffuser,
    apply_diffuser,
    compute_illuminance,
    photons_to_energy,
    photopic_luminosity,
)

# =============================================================================
# Errors
# =============================================================================
from .errors import (
    OisimError,
    InvalidOpticsConfiguration,
    EmptyInputError,
    UnsupportedOffAxisMethod,
    UnsupportedDiffuserMethod,
)

__all__ = [
    # Version
    "__version__",
    # Core data structures
    "WavelengthGrid",
    "resample_spectrum",
    "Optics",
    "Scene",
    "OpticalImage",
    # Pipeline
    "compute_optical_image",
    # Stages
    "compute_irradiance",
    "irradiance_scale",
    "cos4th_factor",
    "apply_offaxis",
    "dl_mtf",
    "dl_mtf_2d",
    "apply_otf",
    "dl_psf",
    "gaussian_diffuser",
    "birefringent_diffuser",
    "apply_diffuser",
    "compute_illuminance",
    "photons_to_energy",
    "photopic_luminosity",
    # Errors
    "OisimError",
    "InvalidOpticsConfiguration",
    "EmptyInputError",
    "UnsupportedOffAxisMethod",
    "UnsupportedDiffuserMethod",
]
