from chromapick.colors import Color
from chromapick.geometry import Rect
from chromapick.pickers import SaturationPlanePicker, Cursor, PointerState
from chromapick.types.color_types import PolarModel
import numpy as np
import pytest

@pytest.fixture
def plane():
    surface = SaturationPlanePicker()
    surface.resize(200, 200)
    return surface

samples_plane_hsv = {
    (100, 50): (0.5, 0.75),
    (0, 0): (0.0, 1.0),
    (200, 200): (1.0, 0.0),
    (50, 150): (0.25, 0.25),
    # outside the extent is clamped onto the nearest edge
    (-50, 300): (0.0, 0.0),
    (500, -10): (1.0, 1.0),
}

samples_plane_hsl = {
    (0, 0): (0.0, 0.0),
    (200, 200): (1.0, 1.0),
    (50, 150): (0.25, 0.75),
    (100, 50): (0.5, 0.25),
    (-50, 300): (0.0, 1.0),
    (500, -10): (1.0, 0.0),
}

def test_pointer_maps_to_saturation_and_value(plane):
    for pos, (s_exp, v_exp) in samples_plane_hsv.items():
        color = Color.from_hsv(0.6, 0.3, 0.3, 0.4)
        assert plane.on_pointer_down(pos, color)
        plane.on_pointer_up(pos, color)

        assert color.saturation == pytest.approx(s_exp)
        assert color.value == pytest.approx(v_exp)
        assert color.hue == 0.6
        assert color.alpha == 0.4

def test_hsl_plane_maps_lightness_downwards():
    plane = SaturationPlanePicker(PolarModel.HSL)
    plane.resize(200, 200)
    for pos, (s_exp, l_exp) in samples_plane_hsl.items():
        color = Color.from_hsl(0.6, 0.3, 0.3, 0.4)
        assert plane.on_pointer_down(pos, color)
        plane.on_pointer_up(pos, color)

        assert color.saturation == pytest.approx(s_exp)
        assert color.lightness == pytest.approx(l_exp)
        assert color.hue == 0.6
        assert color.alpha == 0.4
        assert color.model is PolarModel.HSL

def test_plane_rejects_color_of_other_model(plane):
    color = Color.from_hsl(0.0, 0.5, 0.5)
    before = color.copy()
    with pytest.raises(ValueError):
        plane.on_pointer_down((10, 10), color)
    assert plane.state is PointerState.IDLE
    assert not plane.is_dragging
    # the failed press did not capture, so later moves stay inert
    assert not plane.on_pointer_move((50, 50), color)
    assert color == before

def test_drag_sequence_counts_mutations(plane):
    color = Color.from_hsv(0.0, 0.0, 0.0)
    results = [
        plane.on_pointer_down((10, 10), color),
        plane.on_pointer_move((20, 20), color),
        plane.on_pointer_move((30, 40), color),
        plane.on_pointer_up((30, 40), color),
    ]
    assert results.count(True) == 3
    assert color.saturation == pytest.approx(0.15)
    assert color.value == pytest.approx(0.8)
    assert plane.state is PointerState.IDLE

def test_stray_move_does_not_mutate(plane):
    color = Color.from_hsv(0.2, 0.4, 0.6)
    before = color.copy()
    assert not plane.on_pointer_move((100, 100), color)
    assert color == before
    assert plane.cursor is Cursor.CROSSHAIR

def test_up_releases_capture(plane):
    color = Color.from_hsv(0.0, 0.0, 0.0)
    plane.on_pointer_down((100, 100), color)
    assert plane.is_dragging
    assert not plane.on_pointer_up((100, 100), color)
    assert not plane.on_pointer_move((0, 0), color)
    assert color.saturation == pytest.approx(0.5)

def test_up_without_down_is_harmless(plane):
    color = Color.from_hsv(0.0, 0.0, 0.0)
    assert not plane.on_pointer_up((5, 5), color)
    assert plane.state is PointerState.IDLE

def test_mapping_before_resize_raises():
    plane = SaturationPlanePicker()
    color = Color.from_hsv(0.0, 0.0, 0.0)
    with pytest.raises(RuntimeError):
        plane.on_pointer_down((1, 1), color)
    assert plane.state is PointerState.IDLE

def test_resize_rejects_negative_extent(plane):
    with pytest.raises(ValueError):
        plane.resize(-1, 10)
    assert plane.size == (200.0, 200.0)

def test_gradient_corners(plane):
    gradient = plane.render_gradient(Color.from_hsv(0.0, 1.0, 1.0))
    assert gradient.shape == (200, 200, 4)
    assert gradient.dtype == np.uint8
    assert tuple(gradient[0, 0]) == (255, 255, 255, 255)
    assert tuple(gradient[0, 199]) == (255, 1, 1, 255)
    assert tuple(gradient[199, 0]) == (1, 1, 1, 255)
    assert np.all(gradient[..., 3] == 255)

def test_hsl_gradient_is_black_at_top():
    plane = SaturationPlanePicker("hsl")
    plane.resize(20, 10)
    gradient = plane.render_gradient(Color.from_hsl(0.0, 1.0, 0.5))
    assert gradient.shape == (10, 20, 4)
    assert np.all(gradient[0, :, :3] == 0)

def test_render_buffer(plane):
    color = Color.from_hsv(0.0, 0.0, 1.0)
    buffer = plane.render(color)
    assert isinstance(buffer, bytes)
    assert len(buffer) == 200 * 200 * 4

    # away from the outline and the indicator the buffer is the gradient
    gradient = plane.render_gradient(color)
    pixels = np.frombuffer(buffer, dtype=np.uint8).reshape(200, 200, 4)
    assert np.array_equal(pixels[100:190, 100:190], gradient[100:190, 100:190])
    # the indicator sits in the top left corner
    assert not np.array_equal(pixels[:12, :12], gradient[:12, :12])

def test_render_without_extent():
    plane = SaturationPlanePicker()
    assert plane.render(Color.from_hsv(0.0, 0.0, 0.0)) == b""
    assert plane.render_gradient(Color.from_hsv(0.0, 0.0, 0.0)).shape == (0, 0, 4)
    with pytest.raises(RuntimeError):
        plane.render_image(Color.from_hsv(0.0, 0.0, 0.0))

def test_indicator_tracks_color(plane):
    circle = plane.indicator(Color.from_hsv(0.0, 0.5, 0.75))
    assert (circle.cx, circle.cy) == pytest.approx((100, 50))
    assert circle.radius == pytest.approx(3.5)

def test_indicator_stays_inside_at_extremes(plane):
    bounds = Rect(0, 0, 200, 200)
    for s in (0.0, 1.0):
        for v in (0.0, 1.0):
            extent = plane.indicator_extent(Color.from_hsv(0.3, s, v))
            assert bounds.contains(extent)
            assert extent.x0 >= 0 and extent.y0 >= 0

def test_render_image_is_rgba(plane):
    image = plane.render_image(Color.from_hsv(0.5, 0.5, 0.5))
    assert image.mode == "RGBA"
    assert image.size == (200, 200)

def test_hsl_indicator_stays_inside_at_extremes():
    plane = SaturationPlanePicker(PolarModel.HSL)
    plane.resize(200, 200)
    bounds = Rect(0, 0, 200, 200)
    for s in (0.0, 1.0):
        for l in (0.0, 1.0):
            assert bounds.contains(plane.indicator_extent(Color.from_hsl(0.3, s, l)))
    circle = plane.indicator(Color.from_hsl(0.0, 0.5, 0.25))
    assert (circle.cx, circle.cy) == pytest.approx((100, 50))

def test_indicator_shrinks_on_tiny_plane():
    plane = SaturationPlanePicker()
    plane.resize(8, 8)
    bounds = Rect(0, 0, 8, 8)
    for s in (0.0, 1.0):
        for v in (0.0, 1.0):
            circle = plane.indicator(Color.from_hsv(0.0, s, v))
            assert circle.radius == pytest.approx(2.0)
            assert bounds.contains(plane.indicator_extent(Color.from_hsv(0.0, s, v)))
