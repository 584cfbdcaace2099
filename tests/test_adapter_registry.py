import pytest

from tamyla_ui.runtime import default_adapter_registry
from tamyla_ui.services import (
    AdapterAlreadyRegisteredError,
    AdapterNotFoundError,
    AdapterRegistry,
)


def test_register_and_create():
    reg = AdapterRegistry()
    reg.register("fake", lambda cfg: ("adapter", cfg))
    assert reg.create("fake", "cfg") == ("adapter", "cfg")


def test_double_register_raises():
    reg = AdapterRegistry()
    reg.register("x", object)
    with pytest.raises(AdapterAlreadyRegisteredError):
        reg.register("x", object)
    reg.register("x", dict, allow_override=True)
    assert reg.get("x") is dict


def test_missing_and_try_get():
    reg = AdapterRegistry()
    with pytest.raises(AdapterNotFoundError):
        reg.get("nope")
    assert reg.try_get("nope", 123) == 123


def test_unregister():
    reg = AdapterRegistry()
    reg.register("tmp", object)
    reg.unregister("tmp")
    assert "tmp" not in reg


def test_default_registry_lists_builtins_and_is_fresh():
    a = default_adapter_registry()
    b = default_adapter_registry()
    assert list(a.list_frameworks()) == ["vanilla", "qt"]
    a.unregister("qt")
    assert "qt" in b
