"""GUI configuration loader and data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

import yaml  # type: ignore[import-untyped]

from stopwatch.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class CanvasConfig:
    width: int
    height: int
    background: str = "#1f1f1f"
    scale_mode: Literal["fit", "stretch", "none"] = "fit"


@dataclass(frozen=True)
class SignalBinding:
    signal: str
    mask: int = 0
    invert: bool = False
    direction: Literal["input", "output"] = "output"


@dataclass(frozen=True)
class ComponentConfig:
    id: str
    type: str
    position: Rect | None
    visual: dict[str, Any]
    binding: SignalBinding


@dataclass(frozen=True)
class GuiDesignConfig:
    title: str
    canvas: CanvasConfig
    components: list[ComponentConfig]
    spacing: int = 12


def _parse_rect(value: Any) -> Rect | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)) and len(value) == 4:
        return Rect(float(value[0]), float(value[1]), float(value[2]), float(value[3]))
    raise ConfigurationError("position", f"Invalid rect value: {value}")


def _parse_canvas(value: dict[str, Any]) -> CanvasConfig:
    return CanvasConfig(
        width=int(value.get("width", 480)),
        height=int(value.get("height", 240)),
        background=str(value.get("background", "#1f1f1f")),
        scale_mode=str(value.get("scale_mode", "fit")),  # type: ignore[arg-type]
    )


def _parse_binding(component_id: str, value: dict[str, Any]) -> SignalBinding:
    if "signal" not in value:
        raise ConfigurationError(f"components.{component_id}.binding", "signal is required")
    direction = str(value.get("direction", "output"))
    if direction not in ("input", "output"):
        raise ConfigurationError(
            f"components.{component_id}.binding.direction",
            f"must be 'input' or 'output', got {direction!r}",
        )
    return SignalBinding(
        signal=str(value["signal"]),
        mask=int(value.get("mask", 0)),
        invert=bool(value.get("invert", False)),
        direction=direction,  # type: ignore[arg-type]
    )


def _parse_component(value: dict[str, Any]) -> ComponentConfig:
    component_id = str(value["id"])
    return ComponentConfig(
        id=component_id,
        type=str(value["type"]).upper(),
        position=_parse_rect(value.get("position")),
        visual=dict(value.get("visual", {})),
        binding=_parse_binding(component_id, value.get("binding", {})),
    )


def load_gui_config(path: str | Path) -> GuiDesignConfig:
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse GUI config: {exc}") from exc

    try:
        components = [_parse_component(item) for item in raw.get("components", [])]
    except KeyError as exc:
        raise ConfigurationError(f"Missing required GUI config key: {exc}") from exc

    return GuiDesignConfig(
        title=str(raw.get("title", "Stopwatch")),
        canvas=_parse_canvas(raw.get("canvas", {})),
        components=components,
        spacing=int(raw.get("spacing", 12)),
    )
