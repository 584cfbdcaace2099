"""Baseline (vanilla) adapter.

Bridges the platform to a plain component library: a mapping of
``create_<component>`` factories, each taking the enhanced props and
returning an element. Without an explicit library the adapter uses
`mock_component_library()`, which builds lightweight `Element` records so the
platform is usable headless.

Library hooks ``set_theme(theme)`` and ``update_tokens(tokens)`` are called
when present.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from ...config import settings
from ...config.platform_config import PlatformConfig
from .base import (
    COMPONENT_TYPES,
    ComponentFactoryMissingError,
    component_name,
    enhance_props,
)

__all__ = ["Element", "VanillaAdapter", "mock_component_library", "factory_name"]

_logger = logging.getLogger(__name__)

ComponentLibrary = Mapping[str, Callable[..., Any]]


@dataclass
class Element:
    tag: str
    class_name: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    text: str = ""
    children: List["Element"] = field(default_factory=list)

    @property
    def classes(self) -> List[str]:
        return self.class_name.split()

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.class_name = f"{self.class_name} {name}".strip()


def factory_name(type: str) -> str:
    """``searchBar`` -> ``create_search_bar``."""
    component_name(type)  # raises for unknown types
    return "create_" + re.sub(r"(?<!^)(?=[A-Z])", "_", type).lower()


def _mock_factory(type: str) -> Callable[[Mapping[str, Any]], Element]:
    def _create(props: Mapping[str, Any]) -> Element:
        element = Element(
            tag="div",
            class_name=f"{settings.CSS_PREFIX}-{type} {settings.CSS_PREFIX}-mock-component",
            text=f"Mock {type} component",
        )
        element.attributes["data-type"] = type
        # Scalar props surface as data attributes
        for key, value in props.items():
            if isinstance(value, (str, int, float)) and not isinstance(value, bool):
                element.attributes[f"data-{key}"] = str(value)
        return element

    return _create


def mock_component_library() -> Dict[str, Callable[..., Any]]:
    library: Dict[str, Callable[..., Any]] = {
        factory_name(t): _mock_factory(t) for t in COMPONENT_TYPES
    }
    library["set_theme"] = lambda theme: _logger.debug(
        "mock library theme -> %s", theme.get("name")
    )
    library["update_tokens"] = lambda tokens: _logger.debug(
        "mock library tokens updated (%d categories)", len(tokens)
    )
    return library


class VanillaAdapter:
    framework = "vanilla"

    def __init__(
        self, config: PlatformConfig, library: Optional[ComponentLibrary] = None
    ) -> None:
        self.config = config
        self.library: ComponentLibrary = (
            library if library is not None else mock_component_library()
        )
        self.theme_name: Optional[str] = None
        _logger.debug("vanilla adapter ready (%d factories)", len(self.library))

    def create_component(self, type: str, props: Mapping[str, Any] | None = None) -> Any:
        name = factory_name(type)
        factory = self.library.get(name)
        if not callable(factory):
            raise ComponentFactoryMissingError(
                f"Component factory {name} not found in vanilla library"
            )
        element = factory(enhance_props(type, props))
        if isinstance(element, Element):
            self._apply_features(element)
        return element

    def update_theme(self, theme: Mapping[str, Any]) -> None:
        self.theme_name = theme.get("name")
        hook = self.library.get("set_theme")
        if callable(hook):
            hook(theme)

    def update_tokens(self, tokens: Mapping[str, Any]) -> None:
        hook = self.library.get("update_tokens")
        if callable(hook):
            hook(tokens)

    def get_framework(self) -> str:
        return self.framework

    def _apply_features(self, element: Element) -> None:
        features = self.config.features
        if features.rtl:
            element.attributes["dir"] = "rtl"
        if not features.animations:
            element.add_class(f"{settings.CSS_PREFIX}-no-animations")
        if self.theme_name:
            element.attributes.setdefault("data-theme", self.theme_name)
