"""Rendering back-end adapters.

The Qt adapter is registered lazily so that vanilla-only hosts never import
PyQt6.
"""

from __future__ import annotations

from typing import Any

from ...services.adapter_registry import AdapterRegistry
from .base import (  # noqa: F401
    COMPONENT_TYPES,
    ComponentFactoryMissingError,
    FrameworkAdapter,
    UnknownComponentError,
    enhance_props,
)
from .vanilla import Element, VanillaAdapter, mock_component_library  # noqa: F401


def _create_qt_adapter(config: Any) -> Any:
    from .qt import QtAdapter

    return QtAdapter(config)


def default_adapter_registry() -> AdapterRegistry:
    """Fresh registry with the built-in ``vanilla`` and ``qt`` adapters."""
    registry = AdapterRegistry()
    registry.register("vanilla", VanillaAdapter, origin=__name__)
    registry.register("qt", _create_qt_adapter, origin=__name__)
    return registry
