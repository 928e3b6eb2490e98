from chromapick.config import CheckerStyle, IndicatorStyle
from chromapick.geometry import Circle, Rect
from chromapick.pickers.raster import sample_grid, polar_to_rgba8, checkerboard, composite_over, stroke_extent, draw_indicator, to_image
from chromapick.types.color_types import PolarModel
import numpy as np

def test_sample_grid():
    xx, yy = sample_grid(4, 2)
    assert xx.shape == (2, 4)
    assert np.allclose(xx[0], [0.0, 0.25, 0.5, 0.75])
    assert np.allclose(yy[:, 0], [0.0, 0.5])

def test_polar_to_rgba8_broadcasts_scalars():
    rgba = polar_to_rgba8(PolarModel.HSV, 0.0, 1.0, 1.0, 0.5, (3, 2))
    assert rgba.shape == (3, 2, 4)
    assert np.all(rgba == (255, 0, 0, 128))

def test_checkerboard():
    board = checkerboard(6, 4, CheckerStyle(cell_size=2, light=(255, 255, 255, 255), dark=(0, 0, 0, 255)))
    assert board.shape == (4, 6, 4)
    assert tuple(board[0, 0]) == (255, 255, 255, 255)
    assert tuple(board[0, 2]) == (0, 0, 0, 255)
    assert tuple(board[2, 2]) == (255, 255, 255, 255)

def test_composite_over():
    background = np.full((1, 2, 4), 255, dtype=np.uint8)
    assert tuple(composite_over((0, 0, 0, 0), background)[0, 0]) == (255, 255, 255, 255)
    assert tuple(composite_over((0, 0, 0, 255), background)[0, 1]) == (0, 0, 0, 255)

def test_stroke_extent():
    assert stroke_extent(Circle(10, 10, 3.5), 2.0) == Rect(5.5, 5.5, 14.5, 14.5)
    assert stroke_extent(Rect(2, 2, 8, 4), 2.0) == Rect(1, 1, 9, 5)

def test_draw_indicator_leaves_input_untouched():
    base = to_image(np.zeros((20, 20, 4), dtype=np.uint8))
    result = draw_indicator(base, Circle(10, 10, 3.5), IndicatorStyle(), 1.0)
    assert np.all(np.asarray(base) == 0)
    drawn = np.asarray(result)
    assert drawn[..., 3].max() == 255
    # the middle of the ring stays empty
    assert tuple(drawn[10, 10]) == (0, 0, 0, 0)
