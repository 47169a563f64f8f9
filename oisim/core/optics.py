"""Lens configuration data structure."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..errors import InvalidOpticsConfiguration

__all__ = ["Optics", "OPTICS_MODELS", "normalize_model"]

# Accepted model selectors mapped to their canonical name
OPTICS_MODELS = {
    "diffractionlimited": "diffractionlimited",
    "dlmtf": "diffractionlimited",
    "skip": "skip",
}


def normalize_model(model: str) -> str:
    """Return the canonical optics model name.

    Raises:
        InvalidOpticsConfiguration: If the model is not supported.
    """
    key = str(model).replace(" ", "").replace("_", "").lower()
    if key not in OPTICS_MODELS:
        raise InvalidOpticsConfiguration(
            f"Unsupported optics model {model!r}; "
            f"expected one of {sorted(set(OPTICS_MODELS.values()))}"
        )
    return OPTICS_MODELS[key]


@dataclass(frozen=True, eq=False)
class Optics:
    """Immutable parameters of a diffraction-limited lens.

    Lengths are in metres, wavelengths in nanometres.

    Attributes:
        f_number: Focal length divided by aperture diameter.
        focal_length: Focal length (m).
        model: "diffractionlimited" (alias "dlmtf") or "skip". Validated
            when the optical image is computed.
        offaxis_method: "cos4th", or "none"/"skip" for no falloff.
        diffuser_method: "skip", "blur" or "birefringent".
        diffuser_blur: Gaussian sigma for "blur", or the spot displacement
            for "birefringent" (m). None leaves "blur" disabled.
        transmittance: Optional spectral transmittance of the lens.
        transmittance_wave: Wavelengths (nm) of `transmittance`.

    Example:
        ```python
        optics = Optics(f_number=4.0, focal_length=0.05)
        optics.cutoff_frequency(550)  # 1/(λN) -> ~4.5e5 cycles/m
        ```
    """

    f_number: float = 4.0
    focal_length: float = 3.9e-3
    model: str = "diffractionlimited"
    offaxis_method: str = "cos4th"
    diffuser_method: str = "skip"
    diffuser_blur: Optional[float] = None
    transmittance: Optional[np.ndarray] = None
    transmittance_wave: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        """Validate lens parameters."""
        if not self.f_number > 0:
            raise InvalidOpticsConfiguration(
                f"f-number must be positive, got {self.f_number}"
            )
        if not self.focal_length > 0:
            raise InvalidOpticsConfiguration(
                f"Focal length must be positive, got {self.focal_length}"
            )
        if self.diffuser_blur is not None and self.diffuser_blur < 0:
            raise InvalidOpticsConfiguration(
                f"Diffuser blur must be non-negative, got {self.diffuser_blur}"
            )

        if self.transmittance is not None:
            trans = np.asarray(self.transmittance, dtype=float).ravel()
            if self.transmittance_wave is None:
                raise ValueError("transmittance requires transmittance_wave")
            wave = np.asarray(self.transmittance_wave, dtype=float).ravel()
            if trans.size != wave.size:
                raise ValueError(
                    f"transmittance ({trans.size}) and transmittance_wave "
                    f"({wave.size}) lengths differ"
                )
            if np.any(trans < 0):
                raise ValueError("transmittance must be non-negative")
            object.__setattr__(self, "transmittance", trans)
            object.__setattr__(self, "transmittance_wave", wave)

    @property
    def aperture_diameter(self) -> float:
        """Entrance aperture diameter (m)."""
        return self.focal_length / self.f_number

    @property
    def numerical_aperture(self) -> float:
        """Image-space numerical aperture, 1 / (2N)."""
        return 1.0 / (2.0 * self.f_number)

    def image_distance(self, source_distance: float) -> float:
        """Lens-to-image distance (m) from the thin-lens equation.

        Args:
            source_distance: Object distance from the lens (m).

        Raises:
            InvalidOpticsConfiguration: If the source is not beyond the
                focal length, so no real image forms.
        """
        if np.isinf(source_distance):
            return self.focal_length
        if source_distance <= self.focal_length:
            raise InvalidOpticsConfiguration(
                f"Source distance ({source_distance} m) must exceed the "
                f"focal length ({self.focal_length} m)"
            )
        return 1.0 / (1.0 / self.focal_length - 1.0 / source_distance)

    def magnification(self, source_distance: float) -> float:
        """Lateral magnification; negative for an inverted real image."""
        if np.isinf(source_distance):
            return 0.0
        return -self.image_distance(source_distance) / source_distance

    def cutoff_frequency(self, wavelength: float) -> float:
        """Incoherent diffraction cutoff 1/(λN) in cycles/m.

        Args:
            wavelength: Wavelength in nm.
        """
        return 1.0 / (wavelength * 1e-9 * self.f_number)
