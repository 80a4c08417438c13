"""
Pytest configuration and shared fixtures for the stopwatch test suite.
"""

import copy
import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'stopwatch' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from stopwatch.designs.stopwatch import StopWatch  # noqa: E402
from stopwatch.utils.config_loader import parse_config  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


ENCODING = {
    0: "1000000",
    1: "1111001",
    2: "0100100",
    3: "0110000",
    4: "0011001",
    5: "0010010",
    6: "0000010",
    7: "1111000",
    8: "0000000",
    9: "0010000",
}

CONFIG = {
    "clock": {"frequency": 10, "tick_hz": 10},
    "counter": {"tens_max": 5, "digit_width": 4},
    "display": {"active_low": True, "encoding": ENCODING},
}


@pytest.fixture
def valid_config_dict():
    """
    Fixture providing a complete valid design configuration dictionary.

    Every clock edge is one tenth of a second.
    """
    return copy.deepcopy(CONFIG)


@pytest.fixture
def prescaled_config_dict(valid_config_dict):
    """
    Configuration with a 100 Hz clock: ten edges per tick.
    """
    valid_config_dict["clock"] = {"frequency": 100, "tick_hz": 10}
    return valid_config_dict


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Args:
        temp_yaml_file: Path object for temporary file
        valid_config_dict: Valid configuration dictionary

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_config_dict, f)

    yield temp_yaml_file


@pytest.fixture
def stopwatch_config(valid_config_dict):
    return parse_config(valid_config_dict)


@pytest.fixture
def watch(stopwatch_config):
    """A stopwatch at power-on state, one edge per tenth of a second."""
    design = StopWatch(config=stopwatch_config)
    design.reset()
    return design


@pytest.fixture
def prescaled_watch(prescaled_config_dict):
    design = StopWatch(config=parse_config(prescaled_config_dict))
    design.reset()
    return design


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
