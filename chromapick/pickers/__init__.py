"""
Chromapick Picker Surfaces
==========================

Pointer-driven surfaces that edit a shared ``Color``:

    SaturationPlanePicker(model=PolarModel.HSV)
        x → saturation, y → value (top = 1) or lightness (top = 0)
    HuePicker()
        y → hue
    AlphaPicker()
        y → alpha (top = opaque)

Every surface follows the same pointer state machine::

    IDLE --down--> DRAGGING --move--> DRAGGING --up--> IDLE

``on_pointer_down`` captures and mutates, ``on_pointer_move`` mutates only
while captured, ``on_pointer_up`` releases without mutating. Positions are
clamped to the surface extent before being normalized.

Example
-------
>>> from chromapick import Color
>>> from chromapick.pickers import SaturationPlanePicker
>>> plane = SaturationPlanePicker()
>>> plane.resize(200, 200)
>>> color = Color.from_hsv(0.0, 0.0, 0.0)
>>> plane.on_pointer_down((100, 50), color)
True
>>> color.saturation, color.value
(0.5, 0.75)
>>> len(plane.render(color)) == 200 * 200 * 4
True
"""

from .base import Cursor, PickerSurface, PointerState, SliderSurface
from .plane import SaturationPlanePicker
from .hue import HuePicker
from .alpha import AlphaPicker

__all__ = [
    'Cursor',
    'PickerSurface',
    'PointerState',
    'SliderSurface',
    'SaturationPlanePicker',
    'HuePicker',
    'AlphaPicker',
]
