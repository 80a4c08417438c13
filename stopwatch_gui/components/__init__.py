from stopwatch_gui.components.base import ComponentController, ComponentGraphicsItem
from stopwatch_gui.components.button import ButtonController, ButtonView
from stopwatch_gui.components.led import LedController, LedView
from stopwatch_gui.components.seven_segment import SevenSegmentController, SevenSegmentView

__all__ = [
    "ComponentController",
    "ComponentGraphicsItem",
    "ButtonController",
    "ButtonView",
    "LedController",
    "LedView",
    "SevenSegmentController",
    "SevenSegmentView",
]
