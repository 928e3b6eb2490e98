from chromapick.conversions.to_hsl import hsv_to_hsl, np_hsv_to_hsl, unit_rgb_to_hsl, np_unit_rgb_to_hsl
import numpy as np
from tests.samples import samples_hsv_hsl, samples_rgb_hsl

def test_hsv_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert h_out == h_exp
        assert abs(float(s_out) - s_exp) < 1e-9
        assert abs(float(l_out) - l_exp) < 1e-9

def test_hsv_to_hsl_poles_have_zero_saturation():
    # l == 0 and l == 1 would divide by zero
    assert hsv_to_hsl(0.5, 1.0, 0.0)[1] == 0.0
    assert hsv_to_hsl(0.5, 0.0, 1.0)[1] == 0.0

def test_hsv_to_hsl_numpy():
    the_matrix = np.array(list(samples_hsv_hsl.keys()))
    expected = np.array(list(samples_hsv_hsl.values()))
    result = np_hsv_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1e-9)

def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(float(s_out) - s_exp) < 1e-9
        assert abs(float(l_out) - l_exp) < 1e-9

def test_unit_rgb_to_hsl_saturation_branches():
    # light colors divide by 2 - max - min
    h, s, l = unit_rgb_to_hsl(1.0, 0.5, 0.5)
    assert abs(l - 0.75) < 1e-12
    assert abs(s - 1.0) < 1e-12
    # dark colors divide by max + min
    h, s, l = unit_rgb_to_hsl(0.5, 0.0, 0.0)
    assert abs(l - 0.25) < 1e-12
    assert abs(s - 1.0) < 1e-12

def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    result = np_unit_rgb_to_hsl(r, g, b)
    assert np.allclose(result, expected, atol=1e-9)
