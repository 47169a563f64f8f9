"""Optical image: the spectral irradiance at the sensor plane."""

from typing import Optional, Tuple

import numpy as np

from ..errors import EmptyInputError
from ..utils.fourier import centered_frequencies
from ..utils.padding import crop_spatial
from ..utils.units import convert
from .optics import Optics
from .spectrum import WavelengthGrid

__all__ = ["OpticalImage"]


class OpticalImage:
    """Spectral irradiance cube and the geometry it is sampled on.

    An OpticalImage is created with its optics, handed to
    compute_optical_image(), and filled in by each stage of the
    computation. Accessors for data that has not been computed raise
    EmptyInputError.

    Replacing `photons` always discards the cached illuminance, so the
    illuminance is never stale with respect to the irradiance.

    Attributes:
        optics: Lens configuration used for the computation.
        image_distance: Lens-to-image-plane distance (m).
        sample_spacing: Spatial sample pitch on the image plane (m).
        padding: Samples (rows, cols) of zero border added on each side.

    Example:
        ```python
        oi = OpticalImage(Optics(f_number=4.0, focal_length=0.05))
        oi = compute_optical_image(scene, oi)
        oi.mean_illuminance  # lux
        ```
    """

    def __init__(self, optics: Optional[Optics] = None, name: str = "opticalimage"):
        self.optics = optics if optics is not None else Optics()
        self.name = name
        self.image_distance: Optional[float] = None
        self.sample_spacing: Optional[float] = None
        self.padding: Tuple[int, int] = (0, 0)
        self._photons: Optional[np.ndarray] = None
        self._wavelengths: Optional[WavelengthGrid] = None
        self._fov: Optional[float] = None
        self._illuminance: Optional[np.ndarray] = None
        self._mean_illuminance: Optional[float] = None

    def __repr__(self) -> str:
        size = self.size if self.has_photons else None
        return (
            f"{self.__class__.__name__}(name={self.name!r}, size={size}, "
            f"wavelengths={self._wavelengths!r}, fov={self._fov})"
        )

    # ------------------------------------------------------------------
    # Spectral data
    # ------------------------------------------------------------------

    @property
    def has_photons(self) -> bool:
        return self._photons is not None

    @property
    def photons(self) -> np.ndarray:
        """Spectral irradiance cube (rows, cols, n_wave), photons/(s m² nm)."""
        if self._photons is None:
            raise EmptyInputError("Optical image has no irradiance data")
        return self._photons

    @photons.setter
    def photons(self, value: np.ndarray) -> None:
        value = np.asarray(value, dtype=float)
        if value.ndim != 3:
            raise ValueError(f"Photons must be (rows, cols, n_wave), got {value.shape}")
        if self._wavelengths is not None and value.shape[2] != self._wavelengths.n_wave:
            raise ValueError(
                f"Photons have {value.shape[2]} planes, wavelength grid has "
                f"{self._wavelengths.n_wave}"
            )
        self._photons = value
        self.clear_illuminance()

    @property
    def wavelengths(self) -> WavelengthGrid:
        if self._wavelengths is None:
            raise EmptyInputError("Optical image has no wavelength grid")
        return self._wavelengths

    @wavelengths.setter
    def wavelengths(self, grid: WavelengthGrid) -> None:
        self._wavelengths = grid
        self.clear_illuminance()

    @property
    def fov(self) -> float:
        """Horizontal field of view (degrees) inherited from the scene."""
        if self._fov is None:
            raise EmptyInputError("Optical image has no field of view")
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = float(value)

    @property
    def n_wave(self) -> int:
        return self.wavelengths.n_wave

    @property
    def bin_width(self) -> float:
        return self.wavelengths.bin_width

    @property
    def energy(self) -> np.ndarray:
        """Spectral irradiance in W/(m² nm)."""
        from ..compute.illuminance import photons_to_energy

        return photons_to_energy(self.photons, self.wavelengths.wave)

    def crop_border(self) -> np.ndarray:
        """Photons with the zero-padding border removed."""
        if self.padding == (0, 0):
            return self.photons
        return crop_spatial(self.photons, self.padding)

    # ------------------------------------------------------------------
    # Illuminance
    # ------------------------------------------------------------------

    @property
    def illuminance(self) -> np.ndarray:
        """Illuminance map (lux), computed from the photons if not cached."""
        if self._illuminance is None:
            from ..compute.illuminance import compute_illuminance

            self.set_illuminance(compute_illuminance(self.photons, self.wavelengths)[0])
        return self._illuminance

    @property
    def mean_illuminance(self) -> float:
        """Spatial mean of the illuminance map (lux)."""
        if self._mean_illuminance is None:
            self._mean_illuminance = float(np.mean(self.illuminance))
        return self._mean_illuminance

    def set_illuminance(self, illuminance: np.ndarray, mean: Optional[float] = None) -> None:
        """Cache an illuminance map and its mean."""
        self._illuminance = np.asarray(illuminance, dtype=float)
        self._mean_illuminance = float(np.mean(self._illuminance)) if mean is None else float(mean)

    def clear_illuminance(self) -> None:
        self._illuminance = None
        self._mean_illuminance = None

    # ------------------------------------------------------------------
    # Spatial geometry
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self.photons.shape[0]

    @property
    def cols(self) -> int:
        return self.photons.shape[1]

    @property
    def size(self) -> Tuple[int, int]:
        """Spatial shape (rows, cols), padding included."""
        return self.photons.shape[:2]

    @property
    def center_pixel(self) -> Tuple[int, int]:
        """Index of the optical axis, (rows // 2, cols // 2)."""
        return self.rows // 2, self.cols // 2

    def _spacing(self) -> float:
        if self.sample_spacing is None:
            raise EmptyInputError("Optical image has no spatial sampling")
        return self.sample_spacing

    def _distance(self) -> float:
        if self.image_distance is None:
            raise EmptyInputError("Optical image has no image distance")
        return self.image_distance

    def width(self, unit: str = "m") -> float:
        """Image-plane width of the whole cube."""
        return convert(self._spacing() * self.cols, "m", unit)

    def height(self, unit: str = "m") -> float:
        """Image-plane height of the whole cube."""
        return convert(self._spacing() * self.rows, "m", unit)

    def diagonal(self, unit: str = "m") -> float:
        return float(np.hypot(self.width(unit), self.height(unit)))

    def area(self, unit: str = "m") -> float:
        """Image-plane area in `unit` squared."""
        return self.width(unit) * self.height(unit)

    def spatial_support(self, unit: str = "m") -> Tuple[np.ndarray, np.ndarray]:
        """Sample positions (x, y) relative to the center pixel."""
        dx = self._spacing()
        r0, c0 = self.center_pixel
        x = (np.arange(self.cols) - c0) * dx
        y = (np.arange(self.rows) - r0) * dx
        return convert(x, "m", unit), convert(y, "m", unit)

    # ------------------------------------------------------------------
    # Angular geometry
    # ------------------------------------------------------------------

    def _angle(self, extent: float) -> float:
        return float(np.degrees(2.0 * np.arctan(0.5 * extent / self._distance())))

    @property
    def vertical_fov(self) -> float:
        """Vertical field of view (degrees) of the scene region."""
        rows = self.rows - 2 * self.padding[0]
        return self._angle(rows * self._spacing())

    @property
    def diagonal_fov(self) -> float:
        return float(np.hypot(self.fov, self.vertical_fov))

    @property
    def angular_resolution(self) -> float:
        """Degrees subtended by one sample."""
        return self._angle(self._spacing())

    def frequency_support(self, unit: str = "m") -> Tuple[np.ndarray, np.ndarray]:
        """Centered spatial frequencies (fx, fy) of the cube.

        Args:
            unit: Length unit, giving cycles per `unit`, or "deg" for
                cycles per degree of visual angle.
        """
        if unit == "deg":
            step = self.angular_resolution
        else:
            step = convert(self._spacing(), "m", unit)
        return centered_frequencies(self.cols, step), centered_frequencies(self.rows, step)
