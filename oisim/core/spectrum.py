"""Wavelength sampling shared by the scene, the optics and the optical image."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence, Union

import numpy as np
from scipy.interpolate import interp1d

if TYPE_CHECKING:
    from .optics import Optics

__all__ = ["WavelengthGrid", "as_wavelength_grid", "resample_spectrum", "resolve_transmittance"]


@dataclass(frozen=True, eq=False)
class WavelengthGrid:
    """Ordered wavelength samples in nanometres.

    Attributes:
        wave: 1D array of strictly increasing wavelengths (nm).

    Example:
        ```python
        grid = WavelengthGrid(np.arange(400, 701, 10))
        grid.bin_width  # 10.0
        grid.index_of(555)  # 16 (nearest sample, 560 nm)
        ```
    """

    wave: np.ndarray

    def __post_init__(self) -> None:
        """Validate and freeze the sample array."""
        wave = np.array(self.wave, dtype=float).ravel()
        if wave.size == 0:
            raise ValueError("Wavelength grid must contain at least one sample")
        if np.any(np.diff(wave) <= 0):
            raise ValueError("Wavelength samples must be strictly increasing")
        if wave[0] <= 0:
            raise ValueError(f"Wavelengths must be positive, got {wave[0]}")
        wave.setflags(write=False)
        object.__setattr__(self, "wave", wave)

    def __len__(self) -> int:
        return self.wave.size

    def __repr__(self) -> str:
        if self.n_wave == 1:
            return f"WavelengthGrid({self.wave[0]:g} nm)"
        return (
            f"WavelengthGrid({self.wave[0]:g}-{self.wave[-1]:g} nm, "
            f"n_wave={self.n_wave})"
        )

    @property
    def n_wave(self) -> int:
        """Number of wavelength samples."""
        return self.wave.size

    @property
    def bin_width(self) -> float:
        """Sample spacing in nm; 1 nm for a single-sample grid."""
        if self.n_wave > 1:
            return float(self.wave[1] - self.wave[0])
        return 1.0

    @property
    def wave_m(self) -> np.ndarray:
        """Wavelengths in metres."""
        return self.wave * 1e-9

    def index_of(self, wavelength: float) -> int:
        """Index of the sample nearest to `wavelength` (nm)."""
        return int(np.argmin(np.abs(self.wave - wavelength)))


def as_wavelength_grid(wave: Union[WavelengthGrid, Sequence[float], float]) -> WavelengthGrid:
    """Coerce a grid, a sequence or a single wavelength into a WavelengthGrid."""
    if isinstance(wave, WavelengthGrid):
        return wave
    return WavelengthGrid(np.atleast_1d(np.asarray(wave, dtype=float)))


def resample_spectrum(
    values: np.ndarray,
    src_wave: np.ndarray,
    dst_wave: np.ndarray,
    kind: str = "linear",
    fill_value: Union[str, float] = "edge",
) -> np.ndarray:
    """Interpolate spectral samples onto another wavelength grid.

    Args:
        values: Samples along the last axis, matching `src_wave`.
        src_wave: Wavelengths (nm) of `values`.
        dst_wave: Target wavelengths (nm).
        kind: Interpolation kind passed to scipy's interp1d.
        fill_value: "edge" clamps to the first/last sample outside the
            source range, "extrapolate" extrapolates, a float fills.

    Returns:
        Array with the last axis resampled to `dst_wave`.
    """
    values = np.asarray(values, dtype=float)
    src_wave = np.asarray(src_wave, dtype=float).ravel()
    dst_wave = np.asarray(dst_wave, dtype=float).ravel()

    if values.shape[-1] != src_wave.size:
        raise ValueError(
            f"Spectrum length ({values.shape[-1]}) does not match "
            f"wavelength count ({src_wave.size})"
        )

    if src_wave.size == 1:
        # A single sample carries no spectral shape
        return np.repeat(values, dst_wave.size, axis=-1)

    if fill_value == "edge":
        fill = (values[..., 0], values[..., -1])
    else:
        fill = fill_value

    f = interp1d(src_wave, values, kind=kind, axis=-1, bounds_error=False, fill_value=fill)
    return f(dst_wave)


def resolve_transmittance(optics: "Optics", grid: WavelengthGrid) -> np.ndarray:
    """Optics spectral transmittance sampled on `grid`.

    Returns all ones when the optics carries no transmittance.
    """
    if optics.transmittance is None:
        return np.ones(grid.n_wave)
    trans = resample_spectrum(optics.transmittance, optics.transmittance_wave, grid.wave)
    return np.clip(trans, 0.0, None)
