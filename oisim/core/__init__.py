"""Core data structures: spectral sampling, optics, scene and optical image."""

from .spectrum import WavelengthGrid, as_wavelength_grid, resample_spectrum, resolve_transmittance
from .optics import Optics, OPTICS_MODELS, normalize_model
from .scene import Scene
from .image import OpticalImage

__all__ = [
    "WavelengthGrid",
    "as_wavelength_grid",
    "resample_spectrum",
    "resolve_transmittance",
    "Optics",
    "OPTICS_MODELS",
    "normalize_model",
    "Scene",
    "OpticalImage",
]
