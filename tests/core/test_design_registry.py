import pytest

from stopwatch.core.design import (
    DesignRegistry,
    create_design,
    get_design,
    list_available_designs,
    register_design,
    verify_designs_registered,
)
from stopwatch.core.exceptions import DesignError
from stopwatch.designs.stopwatch import StopWatch


class DummyDesign:
    def __init__(self, **kwargs):
        self.kwargs = kwargs


def test_design_registry_basic_operations():
    registry = DesignRegistry()
    registry.register("dummy", DummyDesign)
    assert registry.get("dummy") is DummyDesign
    assert registry.list_designs() == ["dummy"]

    instance = registry.create("dummy", foo=1)
    assert isinstance(instance, DummyDesign)
    assert instance.kwargs == {"foo": 1}

    with pytest.raises(ValueError):
        registry.register("dummy", DummyDesign)

    with pytest.raises(DesignError) as excinfo:
        registry.get("missing")
    assert excinfo.value.design_name == "missing"
    assert excinfo.value.available == ["dummy"]
    # Still a ValueError for callers that catch the builtin
    assert isinstance(excinfo.value, ValueError)


def test_global_registry_functions(monkeypatch):
    registry = DesignRegistry()
    monkeypatch.setattr("stopwatch.core.design._REGISTRY", registry)

    register_design("dummy", DummyDesign)
    assert get_design("dummy") is DummyDesign
    assert list_available_designs() == ["dummy"]
    instance = create_design("dummy", bar=2)
    assert isinstance(instance, DummyDesign)
    assert instance.kwargs == {"bar": 2}


def test_verify_designs_registered(monkeypatch):
    registry = DesignRegistry()
    monkeypatch.setattr("stopwatch.core.design._REGISTRY", registry)

    with pytest.raises(RuntimeError):
        verify_designs_registered()

    registry.register("dummy", DummyDesign)
    verify_designs_registered()


def test_stopwatch_is_registered():
    assert "stopwatch" in list_available_designs()
    assert get_design("stopwatch") is StopWatch
    design = create_design("stopwatch")
    assert isinstance(design, StopWatch)
