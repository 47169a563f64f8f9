"""Scene descriptor consumed by the optical image computation."""

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from ..errors import EmptyInputError
from .constants import DEFAULT_SOURCE_DISTANCE
from .spectrum import WavelengthGrid, as_wavelength_grid

__all__ = ["Scene"]


@dataclass(frozen=True, eq=False)
class Scene:
    """Immutable spectral radiance scene.

    Attributes:
        radiance: Spectral radiance cube (rows, cols, n_wave) in
            photons/(s sr m² nm). A 2D array is accepted for single
            wavelength scenes.
        wavelengths: Wavelength grid of the last radiance axis. Plain
            sequences are converted to a WavelengthGrid.
        fov: Horizontal field of view (degrees).
        distance: Distance from the scene to the lens (m).

    Example:
        ```python
        scene = Scene(
            radiance=np.full((64, 64, 31), 1e16),
            wavelengths=np.arange(400, 701, 10),
            fov=10.0,
        )
        ```
    """

    radiance: np.ndarray
    wavelengths: Union[WavelengthGrid, np.ndarray]
    fov: float
    distance: float = DEFAULT_SOURCE_DISTANCE

    def __post_init__(self) -> None:
        """Validate the radiance cube against its wavelength grid."""
        grid = as_wavelength_grid(self.wavelengths)
        radiance = np.asarray(self.radiance, dtype=float)

        if radiance.size == 0:
            raise EmptyInputError(f"Scene radiance is empty, shape {radiance.shape}")
        if radiance.ndim == 2:
            radiance = radiance[:, :, np.newaxis]
        if radiance.ndim != 3:
            raise ValueError(
                f"Radiance must be (rows, cols, n_wave), got shape {radiance.shape}"
            )
        if radiance.shape[2] != grid.n_wave:
            raise ValueError(
                f"Radiance has {radiance.shape[2]} wavelength planes but the "
                f"grid has {grid.n_wave} samples"
            )
        if not np.all(np.isfinite(radiance)):
            raise ValueError("Radiance contains NaN or infinite values")
        if np.any(radiance < 0):
            raise ValueError("Radiance must be non-negative")
        if not 0 < self.fov < 180:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {self.fov}")
        if not self.distance > 0:
            raise ValueError(f"Scene distance must be positive, got {self.distance}")

        object.__setattr__(self, "radiance", radiance)
        object.__setattr__(self, "wavelengths", grid)

    @property
    def rows(self) -> int:
        return self.radiance.shape[0]

    @property
    def cols(self) -> int:
        return self.radiance.shape[1]

    @property
    def size(self) -> Tuple[int, int]:
        """Spatial shape (rows, cols)."""
        return self.radiance.shape[:2]

    @property
    def n_wave(self) -> int:
        return self.wavelengths.n_wave
