"""Stages of the optical image computation."""

from .irradiance import irradiance_scale, compute_irradiance
from .falloff import OFFAXIS_METHODS, cos4th_factor, apply_offaxis
from .otf import dl_mtf, dl_mtf_2d, apply_otf, dl_psf
from .diffuser import (
    DIFFUSER_METHODS,
    gaussian_diffuser,
    birefringent_diffuser,
    apply_diffuser,
)
from .illuminance import photons_to_energy, photopic_luminosity, compute_illuminance
from .pipeline import compute_optical_image

__all__ = [
    # Irradiance
    "irradiance_scale",
    "compute_irradiance",
    # Off-axis falloff
    "OFFAXIS_METHODS",
    "cos4th_factor",
    "apply_offaxis",
    # Diffraction-limited OTF
    "dl_mtf",
    "dl_mtf_2d",
    "apply_otf",
    "dl_psf",
    # Diffuser
    "DIFFUSER_METHODS",
    "gaussian_diffuser",
    "birefringent_diffuser",
    "apply_diffuser",
    # Illuminance
    "photons_to_energy",
    "photopic_luminosity",
    "compute_illuminance",
    # Orchestration
    "compute_optical_image",
]
