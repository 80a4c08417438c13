"""Component registry and factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from stopwatch_gui.components.base import ComponentController, ComponentGraphicsItem
from stopwatch_gui.components.button import ButtonController, ButtonView
from stopwatch_gui.components.led import LedController, LedView
from stopwatch_gui.components.seven_segment import SevenSegmentController, SevenSegmentView
from stopwatch_gui.config import ComponentConfig


@dataclass(frozen=True)
class ComponentInstance:
    view: ComponentGraphicsItem
    controller: ComponentController
    config: ComponentConfig


ComponentFactory = Callable[[ComponentConfig], ComponentInstance]


class ComponentRegistry:
    def __init__(self):
        self._factories: Dict[str, ComponentFactory] = {}

    def register(self, component_type: str, factory: ComponentFactory) -> None:
        self._factories[component_type.upper()] = factory

    def create(self, config: ComponentConfig) -> ComponentInstance:
        ctype = config.type.upper()
        if ctype not in self._factories:
            raise ValueError(f"Unknown component type: {ctype}")
        return self._factories[ctype](config)


def _size(config: ComponentConfig, default: tuple[int, int]) -> tuple[int, int]:
    if config.position is not None:
        return int(config.position.width), int(config.position.height)
    size = config.visual.get("size", list(default))
    return int(size[0]), int(size[1])


def _create_led(config: ComponentConfig) -> ComponentInstance:
    view = LedView(
        size=_size(config, (18, 18)),
        on_color=str(config.visual.get("on_color", "#10b981")),
        off_color=str(config.visual.get("off_color", "#0f2f23")),
        border_color=str(config.visual.get("border_color", "#111111")),
    )
    controller = LedController(config.id, config.binding, view)
    return ComponentInstance(view=view, controller=controller, config=config)


def _create_button(config: ComponentConfig) -> ComponentInstance:
    view = ButtonView(
        size=_size(config, (70, 34)),
        label=str(config.visual.get("label", config.id)),
        on_color=str(config.visual.get("on_color", "#f59e0b")),
        off_color=str(config.visual.get("off_color", "#2f2f2f")),
        border_color=str(config.visual.get("border_color", "#111111")),
    )
    controller = ButtonController(config.id, config.binding, view)
    return ComponentInstance(view=view, controller=controller, config=config)


def _create_seven_segment(config: ComponentConfig) -> ComponentInstance:
    view = SevenSegmentView(
        size=_size(config, (90, 150)),
        on_color=str(config.visual.get("on_color", "#ff3b30")),
        off_color=str(config.visual.get("off_color", "#3a0f0f")),
        point=bool(config.visual.get("point", False)),
    )
    controller = SevenSegmentController(config.id, config.binding, view)
    return ComponentInstance(view=view, controller=controller, config=config)


def default_registry() -> ComponentRegistry:
    registry = ComponentRegistry()
    registry.register("LED", _create_led)
    registry.register("BUTTON", _create_button)
    registry.register("SEVEN_SEGMENT", _create_seven_segment)
    return registry
