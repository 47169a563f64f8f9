"""Tests for the Optics and Scene data structures."""

import numpy as np
import pytest

from oisim import EmptyInputError, InvalidOpticsConfiguration, Optics, Scene, WavelengthGrid
from oisim.core.optics import normalize_model


class TestOptics:
    """Tests for Optics dataclass."""

    def test_basic_creation(self):
        optics = Optics(f_number=2.8, focal_length=0.05)
        assert optics.f_number == 2.8
        assert optics.focal_length == 0.05
        assert optics.model == "diffractionlimited"
        assert optics.offaxis_method == "cos4th"
        assert optics.diffuser_method == "skip"
        assert optics.diffuser_blur is None

    def test_derived_aperture(self):
        optics = Optics(f_number=4.0, focal_length=0.05)
        assert np.isclose(optics.aperture_diameter, 0.0125)
        assert np.isclose(optics.numerical_aperture, 0.125)

    @pytest.mark.parametrize("f_number", [0.0, -2.0])
    def test_non_positive_f_number_raises(self, f_number):
        with pytest.raises(InvalidOpticsConfiguration, match="f-number"):
            Optics(f_number=f_number)

    @pytest.mark.parametrize("focal_length", [0.0, -0.01])
    def test_non_positive_focal_length_raises(self, focal_length):
        with pytest.raises(InvalidOpticsConfiguration, match="Focal length"):
            Optics(focal_length=focal_length)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            Optics(f_number=-1)

    def test_negative_diffuser_blur_raises(self):
        with pytest.raises(InvalidOpticsConfiguration, match="Diffuser blur"):
            Optics(diffuser_method="blur", diffuser_blur=-1e-6)

    def test_image_distance_thin_lens(self):
        """1/f = 1/s + 1/s'."""
        optics = Optics(focal_length=0.05)
        assert np.isclose(optics.image_distance(1.0), 1.0 / 19.0)
        assert optics.image_distance(np.inf) == 0.05

    def test_distant_scene_focuses_at_focal_length(self):
        optics = Optics(focal_length=0.05)
        assert np.isclose(optics.image_distance(1e10), 0.05, rtol=1e-9)
        assert abs(optics.magnification(1e10)) < 1e-10

    def test_magnification(self):
        optics = Optics(focal_length=0.05)
        assert np.isclose(optics.magnification(1.0), -1.0 / 19.0)

    def test_source_inside_focal_length_raises(self):
        with pytest.raises(InvalidOpticsConfiguration, match="focal length"):
            Optics(focal_length=0.05).image_distance(0.04)

    def test_cutoff_frequency(self):
        """fc = 1 / (λN)."""
        optics = Optics(f_number=4.0)
        assert np.isclose(optics.cutoff_frequency(550), 1.0 / (550e-9 * 4.0))

    def test_transmittance_length_mismatch_raises(self):
        with pytest.raises(ValueError, match="lengths differ"):
            Optics(transmittance=[1.0, 0.9], transmittance_wave=[400, 500, 600])

    def test_transmittance_requires_wave(self):
        with pytest.raises(ValueError, match="transmittance_wave"):
            Optics(transmittance=[1.0, 0.9])


class TestNormalizeModel:
    """Tests for optics model selection."""

    @pytest.mark.parametrize(
        "model", ["diffractionlimited", "diffractionLimited", "Diffraction Limited", "dlmtf"]
    )
    def test_diffraction_limited_aliases(self, model):
        assert normalize_model(model) == "diffractionlimited"

    def test_skip(self):
        assert normalize_model("Skip") == "skip"

    def test_unsupported_model_raises(self):
        with pytest.raises(InvalidOpticsConfiguration, match="Unsupported optics model"):
            normalize_model("raytrace")


class TestScene:
    """Tests for Scene dataclass."""

    def test_basic_creation(self):
        scene = Scene(np.ones((8, 10, 3)), [450, 550, 650], fov=5.0)
        assert scene.size == (8, 10)
        assert scene.rows == 8
        assert scene.cols == 10
        assert scene.n_wave == 3
        assert isinstance(scene.wavelengths, WavelengthGrid)
        assert scene.distance == 1e10

    def test_2d_radiance_promoted(self):
        scene = Scene(np.ones((8, 8)), [550], fov=5.0)
        assert scene.radiance.shape == (8, 8, 1)

    def test_empty_radiance_raises(self):
        with pytest.raises(EmptyInputError):
            Scene(np.zeros((0, 0, 1)), [550], fov=5.0)

    def test_wavelength_mismatch_raises(self):
        with pytest.raises(ValueError, match="wavelength planes"):
            Scene(np.ones((4, 4, 2)), [450, 550, 650], fov=5.0)

    def test_negative_radiance_raises(self):
        radiance = np.ones((4, 4, 1))
        radiance[0, 0, 0] = -1.0
        with pytest.raises(ValueError, match="non-negative"):
            Scene(radiance, [550], fov=5.0)

    def test_nan_radiance_raises(self):
        radiance = np.ones((4, 4, 1))
        radiance[1, 1, 0] = np.nan
        with pytest.raises(ValueError, match="NaN"):
            Scene(radiance, [550], fov=5.0)

    @pytest.mark.parametrize("fov", [0.0, -5.0, 180.0])
    def test_invalid_fov_raises(self, fov):
        with pytest.raises(ValueError, match="Field of view"):
            Scene(np.ones((4, 4, 1)), [550], fov=fov)

    def test_invalid_distance_raises(self):
        with pytest.raises(ValueError, match="distance"):
            Scene(np.ones((4, 4, 1)), [550], fov=5.0, distance=0.0)
