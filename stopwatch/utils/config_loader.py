"""Helpers for loading and validating design configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from stopwatch.core.exceptions import ConfigurationError

SEGMENT_COUNT = 7
DIGITS = tuple(range(10))


@dataclass(frozen=True)
class ClockConfig:
    frequency: int
    tick_hz: int

    @property
    def cycles_per_tick(self) -> int:
        return self.frequency // self.tick_hz


@dataclass(frozen=True)
class CounterConfig:
    tens_max: int = 5
    digit_width: int = 4


@dataclass(frozen=True)
class DisplayConfig:
    encoding: tuple[int, ...]
    active_low: bool = True
    blank: int = 0b1111111

    def pattern_for(self, digit: int) -> Optional[int]:
        """Pattern for a digit in 0-9, or None when out of range."""
        if 0 <= digit < len(self.encoding):
            return self.encoding[digit]
        return None


@dataclass(frozen=True)
class StopwatchConfig:
    clock: ClockConfig
    counter: CounterConfig
    display: DisplayConfig


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, StopwatchConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(design_name: str, path: Optional[str] = None) -> str:
    if path is None:
        # Config files are in stopwatch/designs/{design_name}/config.yaml
        base = Path(__file__).parent.parent / "designs" / design_name / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config root must be a mapping: {path}")
    return raw


def _parse_pattern(key: str, value: Any) -> int:
    """Parse a segment pattern written as 'gfedcba' bits, e.g. '1000000'."""
    text = str(value).strip()
    if len(text) != SEGMENT_COUNT or set(text) - {"0", "1"}:
        raise ConfigurationError(
            key, f"pattern must be {SEGMENT_COUNT} characters of 0/1, got {value!r}"
        )
    return int(text, 2)


def _int_value(key: str, value: Any) -> int:
    # bool is an int subclass; YAML true/false must not pass as 1/0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(key, f"must be an integer, got {value!r}")
    return value


def _build_clock_cfg(clock_raw: dict[str, Any]) -> ClockConfig:
    cfg = ClockConfig(
        frequency=_int_value("clock.frequency", clock_raw["frequency"]),
        tick_hz=_int_value("clock.tick_hz", clock_raw.get("tick_hz", 10)),
    )
    if cfg.frequency <= 0 or cfg.tick_hz <= 0:
        raise ConfigurationError("clock", "frequency and tick_hz must be positive")
    if cfg.frequency % cfg.tick_hz != 0:
        raise ConfigurationError(
            "clock.tick_hz",
            f"{cfg.tick_hz} Hz does not divide clock frequency {cfg.frequency} Hz",
        )
    return cfg


def _build_counter_cfg(counter_raw: dict[str, Any]) -> CounterConfig:
    cfg = CounterConfig(
        tens_max=_int_value("counter.tens_max", counter_raw.get("tens_max", 5)),
        digit_width=_int_value("counter.digit_width", counter_raw.get("digit_width", 4)),
    )
    if not 1 <= cfg.tens_max <= 9:
        raise ConfigurationError("counter.tens_max", "must be between 1 and 9")
    if not 4 <= cfg.digit_width <= 8:
        raise ConfigurationError("counter.digit_width", "must be between 4 and 8 bits")
    return cfg


def _build_display_cfg(display_raw: dict[str, Any]) -> DisplayConfig:
    encoding_raw = display_raw["encoding"]
    keys = {int(k) for k in encoding_raw}
    if keys != set(DIGITS):
        raise ConfigurationError(
            "display.encoding", f"must define exactly digits 0-9, got {sorted(keys)}"
        )

    encoding = tuple(
        _parse_pattern(f"display.encoding.{d}", _lookup_digit(encoding_raw, d))
        for d in DIGITS
    )
    if len(set(encoding)) != len(encoding):
        raise ConfigurationError("display.encoding", "patterns must be distinct")

    active_low = display_raw.get("active_low", True)
    if not isinstance(active_low, bool):
        raise ConfigurationError(
            "display.active_low", f"must be true or false, got {active_low!r}"
        )
    all_off = (1 << SEGMENT_COUNT) - 1 if active_low else 0
    blank_raw = display_raw.get("blank")
    blank = all_off if blank_raw is None else _parse_pattern("display.blank", blank_raw)
    if blank in encoding:
        raise ConfigurationError("display.blank", "must differ from every digit pattern")

    return DisplayConfig(encoding=encoding, active_low=active_low, blank=blank)


def _lookup_digit(encoding_raw: dict[Any, Any], digit: int) -> Any:
    # YAML keys may load as int or str depending on quoting
    if digit in encoding_raw:
        return encoding_raw[digit]
    return encoding_raw[str(digit)]


def parse_config(raw: dict[str, Any]) -> StopwatchConfig:
    """Build a validated StopwatchConfig from a raw mapping."""
    try:
        cfg = StopwatchConfig(
            clock=_build_clock_cfg(raw["clock"]),
            counter=_build_counter_cfg(raw.get("counter") or {}),
            display=_build_display_cfg(raw["display"]),
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    return cfg


def load_config(design_name: str = "stopwatch", path: Optional[str] = None) -> StopwatchConfig:
    """Load and validate configuration from a YAML file.

    Args:
        design_name: Design identifier used to find the bundled config.
        path: Optional path to YAML config. If None, load the bundled
            stopwatch/designs/{design_name}/config.yaml.

    Returns:
        StopwatchConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(design_name=design_name, path=path))
    raw = _load_yaml_file(p)

    return parse_config(raw)


def get_config(design_name: str = "stopwatch") -> StopwatchConfig:
    """Return the bundled config for design_name, loading and caching if necessary.

    THREAD SAFETY: This function is thread-safe.
    """
    with _CACHE_LOCK:
        if design_name not in _LOADER_CACHE:
            _LOADER_CACHE[design_name] = load_config(design_name=design_name)
        return _LOADER_CACHE[design_name]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
