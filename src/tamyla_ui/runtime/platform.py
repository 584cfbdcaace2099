"""Platform: the runtime dispatcher.

Owns one `TokenStore`, one `ThemeRegistry` and exactly one bound adapter.
Component-creation calls are decorated with the current theme and token
snapshots and forwarded to the adapter. The adapter is subscribed to
``THEME_CHANGED`` and ``TOKENS_UPDATED`` on the platform bus, so every change
reaches it synchronously, including ones made through `Platform.themes` or
`Platform.tokens`.

Framework binding happens once, at construction: an explicit tag is looked up
in the adapter registry (unknown tag -> `UnsupportedFrameworkError`), while
``"auto"`` calls the detector exactly once. A different framework needs a
new `Platform`.

There is no process-wide default instance. Hosts build one with
`create_platform` (or the framework-specific helpers) and pass it around.
Instances share nothing: each gets its own bus, store and registry unless a
bus is supplied explicitly. Platforms sharing a bus also share its
notifications.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..config import settings
from ..config.platform_config import PlatformConfig
from ..design.style_emitter import StyleApplier
from ..design.style_surface import StyleSurface
from ..design.theme_registry import ThemeRecord, ThemeRegistry
from ..design.token_store import TokenStore, TokenTree
from ..services.adapter_registry import AdapterRegistry
from ..services.event_bus import Event, EventBus, PlatformEvent
from ..services.logging_service import LoggingService
from .adapters import default_adapter_registry
from .adapters.base import FrameworkAdapter
from .detection import BASELINE_FRAMEWORK, Detector, detect_framework

__all__ = [
    "Platform",
    "UnsupportedFrameworkError",
    "create_platform",
    "create_vanilla_platform",
    "create_qt_platform",
]

_logger = logging.getLogger(__name__)


class UnsupportedFrameworkError(ValueError):
    """Raised at construction for an explicit framework with no adapter."""


def _component(type_name: str) -> Callable[..., Any]:
    def factory(self: "Platform", props: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Any:
        merged = dict(props or {})
        merged.update(kwargs)
        return self.create(type_name, merged)

    factory.__name__ = type_name
    factory.__doc__ = f"Create a ``{type_name}`` component (see `Platform.create`)."
    return factory


class Platform:
    def __init__(
        self,
        config: PlatformConfig,
        *,
        detector: Optional[Detector] = None,
        adapters: Optional[AdapterRegistry] = None,
        surface: Optional[StyleSurface] = None,
        bus: Optional[EventBus] = None,
        logging_service: Optional[LoggingService] = None,
    ) -> None:
        self._config = config
        registry = adapters if adapters is not None else default_adapter_registry()
        self._framework = self._resolve_framework(config.framework, detector, registry)
        self._bus = bus if bus is not None else EventBus()
        self._logging_service = logging_service
        # Applier must subscribe before the registry activates its initial theme
        self._applier: Optional[StyleApplier] = None
        if surface is not None:
            self._applier = StyleApplier(surface).attach(self._bus)
        self._token_store = TokenStore(config.tokens, bus=self._bus)
        self._theme_registry = ThemeRegistry(self._token_store, config.theme, bus=self._bus)
        self._adapter: FrameworkAdapter = registry.create(self._framework, config)
        # Initial theme is carried by the decorated props, not pushed
        self._bus.subscribe(PlatformEvent.THEME_CHANGED, self._on_theme_changed)
        self._bus.subscribe(PlatformEvent.TOKENS_UPDATED, self._on_tokens_updated)
        _logger.info("platform bound to %s adapter", self._framework)

    @classmethod
    def with_defaults(
        cls,
        *,
        detector: Optional[Detector] = None,
        adapters: Optional[AdapterRegistry] = None,
        surface: Optional[StyleSurface] = None,
        bus: Optional[EventBus] = None,
        logging_service: Optional[LoggingService] = None,
        **overrides: Any,
    ) -> "Platform":
        """Build a platform from config keyword overrides (framework, theme, tokens, features)."""
        return cls(
            PlatformConfig.with_defaults(**overrides),
            detector=detector,
            adapters=adapters,
            surface=surface,
            bus=bus,
            logging_service=logging_service,
        )

    # Component factories ---------------------------------------------------
    def create(self, type: str, props: Optional[Mapping[str, Any]] = None) -> Any:
        """Forward to the adapter with ``theme``/``tokens`` snapshots added to ``props``."""
        decorated: Dict[str, Any] = dict(props or {})
        decorated["theme"] = self._theme_registry.get_current_theme()
        decorated["tokens"] = self._token_store.get_tokens()
        return self._adapter.create_component(type, decorated)

    # Atoms
    button = _component("button")
    card = _component("card")
    input = _component("input")
    # Molecules
    search_bar = _component("searchBar")
    action_card = _component("actionCard")
    content_card = _component("contentCard")
    # Organisms
    dashboard = _component("dashboard")
    search_interface = _component("searchInterface")
    # Applications
    content_manager = _component("contentManager")
    enhanced_search = _component("enhancedSearch")
    campaign_selector = _component("campaignSelector")

    # Theme management ------------------------------------------------------
    def set_theme(self, name: str) -> None:
        self._theme_registry.set_theme(name)

    def get_theme(self) -> ThemeRecord:
        return self._theme_registry.get_current_theme()

    # Token management ------------------------------------------------------
    def get_tokens(self) -> TokenTree:
        return self._token_store.get_tokens()

    def update_tokens(self, partial: Mapping[str, Any]) -> None:
        self._token_store.update_tokens(partial)

    # Accessors -------------------------------------------------------------
    @property
    def themes(self) -> ThemeRegistry:
        return self._theme_registry

    @property
    def tokens(self) -> TokenStore:
        return self._token_store

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def adapter(self) -> FrameworkAdapter:
        return self._adapter

    def get_config(self) -> PlatformConfig:
        return replace(self._config, tokens=deepcopy(dict(self._config.tokens)))

    def get_version(self) -> str:
        return settings.VERSION

    def get_framework(self) -> str:
        return self._adapter.get_framework()

    def debug(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {
            "config": self._config.to_dict(),
            "framework": self.get_framework(),
            "theme": self.get_theme(),
            "tokens": self.get_tokens(),
            "version": self.get_version(),
        }
        if self._logging_service is not None:
            info["logs"] = [e.to_dict() for e in self._logging_service.recent()]
        return info

    def close(self) -> None:
        """Detach the style applier; the platform stays usable without a surface."""
        if self._applier is not None:
            self._applier.detach()
            self._applier = None

    # Internal --------------------------------------------------------------
    def _on_theme_changed(self, evt: Event) -> None:
        theme = (evt.payload or {}).get("theme")
        if theme is not None:
            self._adapter.update_theme(theme)

    def _on_tokens_updated(self, evt: Event) -> None:
        tokens = (evt.payload or {}).get("tokens")
        if tokens is not None:
            self._adapter.update_tokens(tokens)

    @staticmethod
    def _resolve_framework(
        framework: str, detector: Optional[Detector], registry: AdapterRegistry
    ) -> str:
        if framework != settings.AUTO_FRAMEWORK:
            if framework not in registry:
                raise UnsupportedFrameworkError(f"Unsupported framework: {framework}")
            return framework
        detected = detector() if detector is not None else detect_framework()
        if detected not in registry:
            _logger.warning(
                "detected framework %r has no adapter; using %s", detected, BASELINE_FRAMEWORK
            )
            return BASELINE_FRAMEWORK
        return detected


def create_platform(**kwargs: Any) -> Platform:
    """Fresh `Platform` with defaults applied (``framework="auto"`` unless overridden)."""
    return Platform.with_defaults(**kwargs)


def create_vanilla_platform(**kwargs: Any) -> Platform:
    return Platform.with_defaults(framework="vanilla", **kwargs)


def create_qt_platform(**kwargs: Any) -> Platform:
    return Platform.with_defaults(framework="qt", **kwargs)
