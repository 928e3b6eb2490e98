from chromapick.conversions.to_rgb import hsl_to_unit_rgb, hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_hsv_to_unit_rgb, hue_to_rgb
import numpy as np
import pytest
from tests.samples import samples_hsv_rgb, samples_hsl_rgb

def test_hsv_to_unit_rgb():
    for (h, s, v), (r_exp, g_exp, b_exp) in samples_hsv_rgb.items():
        r, g, b = hsv_to_unit_rgb(h, s, v)

        assert abs(float(r) - r_exp) < 1e-9
        assert abs(float(g) - g_exp) < 1e-9
        assert abs(float(b) - b_exp) < 1e-9

def test_hsv_to_unit_rgb_known_values():
    assert hsv_to_unit_rgb(30 / 360, 1.0, 1.0) == pytest.approx((1.0, 0.5, 0.0))
    assert hsv_to_unit_rgb(60 / 360, 0.5, 0.75) == pytest.approx((0.75, 0.75, 0.375))

def test_hsv_sector_boundaries_are_continuous():
    # exact multiples of 1/6 sit on the upper edge of the lower sector
    for k in range(1, 6):
        on_edge = hsv_to_unit_rgb(k / 6, 1.0, 1.0)
        below = hsv_to_unit_rgb(k / 6 - 1e-9, 1.0, 1.0)
        above = hsv_to_unit_rgb(k / 6 + 1e-9, 1.0, 1.0)
        assert np.allclose(on_edge, below, atol=1e-6)
        assert np.allclose(on_edge, above, atol=1e-6)

def test_hsv_hue_outside_unit_interval_is_wrapped():
    assert hsv_to_unit_rgb(1.25, 1.0, 1.0) == pytest.approx(hsv_to_unit_rgb(0.25, 1.0, 1.0))
    assert hsv_to_unit_rgb(-0.25, 1.0, 1.0) == pytest.approx(hsv_to_unit_rgb(0.75, 1.0, 1.0))
    assert hsv_to_unit_rgb(1.0, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))

def test_hsv_out_of_range_components_propagate():
    # no clamping: a value above one yields channels above one
    r, g, b = hsv_to_unit_rgb(0.0, 0.0, 1.5)
    assert (r, g, b) == pytest.approx((1.5, 1.5, 1.5))

def test_hsv_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsv_rgb.keys()))
    expected = np.array(list(samples_hsv_rgb.values()))
    result = np_hsv_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=1e-9)

def test_hsv_numpy_matches_scalar_on_grid():
    h = np.linspace(0.0, 1.0, 37)
    result = np_hsv_to_unit_rgb(h, 0.8, 0.6)
    for i, hue in enumerate(h):
        assert np.allclose(result[i], hsv_to_unit_rgb(hue, 0.8, 0.6), atol=1e-12)

def test_hue_to_rgb_segments():
    p, q = 0.2, 0.8
    assert hue_to_rgb(p, q, 0.0) == pytest.approx(p)
    assert hue_to_rgb(p, q, 1 / 12) == pytest.approx(0.5)
    assert hue_to_rgb(p, q, 0.25) == pytest.approx(q)
    assert hue_to_rgb(p, q, 0.9) == pytest.approx(p)
    assert hue_to_rgb(p, q, -0.75) == pytest.approx(q)

def test_hsl_to_unit_rgb():
    for (h, s, l), (r_exp, g_exp, b_exp) in samples_hsl_rgb.items():
        r, g, b = hsl_to_unit_rgb(h, s, l)

        assert abs(float(r) - r_exp) < 1e-9
        assert abs(float(g) - g_exp) < 1e-9
        assert abs(float(b) - b_exp) < 1e-9

def test_hsl_achromatic_ignores_hue():
    for h in (0.0, 0.3, 0.99):
        assert hsl_to_unit_rgb(h, 0.0, 0.4) == (0.4, 0.4, 0.4)

def test_hsl_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    expected = np.array(list(samples_hsl_rgb.values()))
    result = np_hsl_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1e-9)

def test_numpy_broadcasts_scalars():
    h = np.zeros((4, 5))
    assert np_hsv_to_unit_rgb(h, 1.0, 1.0).shape == (4, 5, 3)
    assert np_hsl_to_unit_rgb(h, 1.0, 0.5).shape == (4, 5, 3)
