"""Optical image computation for a diffraction-limited lens."""

import logging
from typing import Callable, Optional, Tuple

import numpy as np

from ..core.image import OpticalImage
from ..core.optics import normalize_model
from ..core.scene import Scene
from ..core.spectrum import resolve_transmittance
from .diffuser import apply_diffuser
from .falloff import apply_offaxis
from .illuminance import compute_illuminance
from .irradiance import compute_irradiance
from .otf import apply_otf

__all__ = ["compute_optical_image"]

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float, str], None]


def compute_optical_image(
    scene: Scene,
    oi: OpticalImage,
    padding: Optional[Tuple[int, int]] = None,
    max_workers: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> OpticalImage:
    """Form the optical image of `scene` through the optics of `oi`.

    Stages run in a fixed order: irradiance, off-axis falloff, OTF
    (skipped for the "skip" model), diffuser, illuminance.

    Args:
        scene: Scene to image.
        oi: Optical image carrying the optics configuration. It is filled
            in place and returned.
        padding: Zero border (rows, cols) added around the scene. Defaults
            to ceil(n / 8) per axis.
        max_workers: Threads used to filter wavelength planes in the OTF
            stage. None filters serially.
        progress: Optional callable receiving (fraction, message) at each
            checkpoint.

    Returns:
        The same OpticalImage with photons, wavelengths, field of view,
        sampling and illuminance set.

    Raises:
        InvalidOpticsConfiguration: Unsupported model, or a scene closer
            than the focal length. `oi` is left untouched.

    Example:
        ```python
        scene = Scene(radiance, wavelengths=np.arange(400, 701, 10), fov=10.0)
        oi = compute_optical_image(scene, OpticalImage(Optics(f_number=4.0)))
        ```
    """
    optics = oi.optics
    model = normalize_model(optics.model)
    label = "OI-DL" if model == "diffractionlimited" else "Skip OTF"

    # Everything that can fail on configuration is resolved before oi changes
    image_distance = optics.image_distance(scene.distance)
    magnification = optics.magnification(scene.distance)
    scene_width = 2.0 * image_distance * np.tan(np.radians(scene.fov) / 2.0)
    sample_spacing = scene_width / scene.cols
    transmittance = None
    if optics.transmittance is not None:
        transmittance = resolve_transmittance(optics, scene.wavelengths)

    def report(fraction: float, message: str) -> None:
        logger.debug("%s: %s (%.0f%%)", label, message, 100 * fraction)
        if progress is not None:
            progress(fraction, f"{label}: {message}")

    oi.fov = scene.fov
    oi.wavelengths = scene.wavelengths
    oi.image_distance = image_distance
    oi.sample_spacing = sample_spacing

    report(0.0, "Calculating irradiance")
    photons, oi.padding = compute_irradiance(
        scene.radiance,
        optics.f_number,
        magnification=magnification,
        transmittance=transmittance,
        padding=padding,
    )

    report(0.3, "Calculating off-axis falloff")
    photons = apply_offaxis(photons, optics.offaxis_method, sample_spacing, image_distance)

    if model == "diffractionlimited":
        report(0.6, "Applying OTF")
        photons = apply_otf(
            photons,
            scene.wavelengths.wave,
            optics.f_number,
            sample_spacing,
            max_workers=max_workers,
        )

    if (optics.diffuser_method or "skip").lower() in ("blur", "birefringent"):
        report(0.75, "Diffuser")
    photons = apply_diffuser(photons, optics.diffuser_method, optics.diffuser_blur, sample_spacing)
    oi.photons = photons

    report(0.9, "Calculating illuminance")
    illuminance, mean = compute_illuminance(oi.photons, oi.wavelengths)
    oi.set_illuminance(illuminance, mean)

    report(1.0, "Done")
    logger.info(
        "Computed optical image %s: %dx%d, %d wavelengths, mean illuminance %.4g lux",
        oi.name,
        oi.rows,
        oi.cols,
        oi.n_wave,
        mean,
    )
    return oi
