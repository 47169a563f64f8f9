"""Tests for off-axis relative illumination."""

import numpy as np
import pytest

from oisim import UnsupportedOffAxisMethod, apply_offaxis, cos4th_factor


def _radius_squared(shape, spacing):
    rows, cols = shape
    y = (np.arange(rows) - rows // 2) * spacing
    x = (np.arange(cols) - cols // 2) * spacing
    xx, yy = np.meshgrid(x, y, indexing="xy")
    return xx**2 + yy**2


class TestCos4thFactor:
    """Tests for cos4th_factor."""

    @pytest.mark.parametrize("shape", [(33, 33), (32, 48), (7, 10)])
    def test_unity_at_center(self, shape):
        factor = cos4th_factor(shape, sample_spacing=2e-6, image_distance=4e-3)
        assert factor[shape[0] // 2, shape[1] // 2] == 1.0
        assert factor.max() == 1.0

    def test_known_angle(self):
        """At 45 degrees cos⁴θ = 1/4."""
        factor = cos4th_factor((9, 9), sample_spacing=1.0, image_distance=4.0)
        assert np.isclose(factor[4, 8], 0.25)
        assert np.isclose(factor[0, 4], 0.25)

    def test_radially_symmetric(self):
        factor = cos4th_factor((33, 33), sample_spacing=1e-5, image_distance=1e-3)
        assert np.allclose(factor, factor[::-1, :])
        assert np.allclose(factor, factor[:, ::-1])
        assert np.allclose(factor, factor.T)

    def test_non_increasing_with_radius(self):
        shape, spacing = (25, 31), 1e-5
        factor = cos4th_factor(shape, sample_spacing=spacing, image_distance=1e-3)
        order = np.argsort(_radius_squared(shape, spacing), axis=None, kind="stable")
        assert np.all(np.diff(factor.ravel()[order]) <= 0)

    def test_invalid_geometry_raises(self):
        with pytest.raises(ValueError):
            cos4th_factor((8, 8), sample_spacing=0.0, image_distance=1e-3)


class TestApplyOffAxis:
    """Tests for apply_offaxis dispatch."""

    @pytest.fixture
    def photons(self):
        return np.ones((21, 21, 3))

    @pytest.mark.parametrize("method", ["none", "skip", "", "None"])
    def test_identity_methods(self, photons, method):
        out = apply_offaxis(photons, method, sample_spacing=1e-5, image_distance=1e-3)
        assert out is photons

    def test_cos4th_every_plane(self, photons):
        out = apply_offaxis(photons, "cos4th", sample_spacing=1e-5, image_distance=1e-3)
        factor = cos4th_factor((21, 21), 1e-5, 1e-3)
        for i in range(3):
            assert np.allclose(out[..., i], factor)

    def test_unknown_method_falls_back_to_cos4th(self, photons):
        """Unknown methods warn and apply cos4th instead of failing."""
        expected = apply_offaxis(photons, "cos4th", 1e-5, 1e-3)
        with pytest.warns(UnsupportedOffAxisMethod, match="codev"):
            out = apply_offaxis(photons, "codev", 1e-5, 1e-3)
        assert np.array_equal(out, expected)
