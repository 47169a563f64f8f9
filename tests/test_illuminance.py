"""Tests for photometric illuminance."""

import numpy as np
import pytest

from oisim import WavelengthGrid, compute_illuminance, photons_to_energy, photopic_luminosity
from oisim.core.constants import PLANCK, SPEED_OF_LIGHT


class TestPhotometry:
    """Tests for energy conversion and V(λ)."""

    def test_photon_energy(self):
        """One photon at λ carries hc/λ joules."""
        energy = photons_to_energy(np.array([1.0]), np.array([555.0]))
        assert np.isclose(energy[0], PLANCK * SPEED_OF_LIGHT / 555e-9)

    def test_energy_along_last_axis(self):
        photons = np.ones((2, 3, 2))
        energy = photons_to_energy(photons, np.array([400.0, 800.0]))
        assert np.allclose(energy[..., 0], 2.0 * energy[..., 1])

    def test_photopic_peak(self):
        assert photopic_luminosity(np.array([555.0]))[0] == 1.0
        wave = np.arange(380.0, 781.0, 1.0)
        assert wave[np.argmax(photopic_luminosity(wave))] == 555.0

    def test_photopic_outside_visible(self):
        assert np.all(photopic_luminosity(np.array([300.0, 379.0, 781.0, 1000.0])) == 0)

    def test_photopic_interpolated(self):
        v = photopic_luminosity(np.array([550.0, 552.5, 555.0]))
        assert np.isclose(v[1], 0.5 * (v[0] + v[2]))


class TestComputeIlluminance:
    """Tests for compute_illuminance."""

    def test_monochromatic_555(self):
        """At 555 nm with a 1 nm bin, lux = 683 * irradiance in W/m²."""
        photons = np.full((4, 5, 1), 1e18)
        illuminance, mean = compute_illuminance(photons, WavelengthGrid([555.0]))
        watts = 1e18 * PLANCK * SPEED_OF_LIGHT / 555e-9
        assert illuminance.shape == (4, 5)
        assert np.allclose(illuminance, 683.0 * watts)
        assert np.isclose(mean, 683.0 * watts)

    def test_bin_width_scales(self):
        photons = np.ones((2, 2, 2)) * 1e18
        narrow, _ = compute_illuminance(photons, [550.0, 560.0])
        wide, _ = compute_illuminance(photons, [550.0, 570.0])
        # Same V-weighted energy at 550 nm dominates; bin width doubles
        assert wide[0, 0] > narrow[0, 0]

    def test_zero_cube(self):
        illuminance, mean = compute_illuminance(np.zeros((6, 6, 31)), np.arange(400, 701, 10))
        assert np.array_equal(illuminance, np.zeros((6, 6)))
        assert mean == 0.0

    def test_non_negative(self):
        rng = np.random.default_rng(3)
        illuminance, mean = compute_illuminance(
            rng.uniform(0, 1e17, (8, 8, 31)), np.arange(400, 701, 10)
        )
        assert np.all(illuminance >= 0)
        assert mean > 0

    def test_invisible_light(self):
        """Infrared photons produce no illuminance."""
        illuminance, _ = compute_illuminance(np.ones((3, 3, 2)) * 1e18, [900.0, 1000.0])
        assert np.all(illuminance == 0)

    def test_plane_count_mismatch_raises(self):
        with pytest.raises(ValueError, match="planes"):
            compute_illuminance(np.ones((3, 3, 2)), [550.0])
