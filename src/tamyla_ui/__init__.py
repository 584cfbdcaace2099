"""Tamyla UI platform public API.

Curated surface for hosts: build a `Platform` with `create_platform` (or a
framework-specific helper), or use the design layer directly
(`TokenStore`, `ThemeRegistry`) for headless style generation.

Prefer namespaced access for anything deeper (``from tamyla_ui import design``).
"""

from __future__ import annotations

from .config import FeatureFlags, PlatformConfig, settings  # noqa: F401
from .design import (  # noqa: F401
    InMemoryStyleSurface,
    StyleApplier,
    ThemeNotFoundError,
    ThemeRegistry,
    TokenStore,
    deep_merge,
)
from .services import EventBus, LoggingService, PlatformEvent  # noqa: F401
from .runtime import (  # noqa: F401
    Platform,
    UnsupportedFrameworkError,
    create_platform,
    create_qt_platform,
    create_vanilla_platform,
    default_adapter_registry,
    detect_framework,
)
from . import design  # noqa: F401

__version__ = settings.VERSION

__all__ = [
    "FeatureFlags",
    "PlatformConfig",
    "settings",
    "InMemoryStyleSurface",
    "StyleApplier",
    "ThemeNotFoundError",
    "ThemeRegistry",
    "TokenStore",
    "deep_merge",
    "EventBus",
    "LoggingService",
    "PlatformEvent",
    "Platform",
    "UnsupportedFrameworkError",
    "create_platform",
    "create_qt_platform",
    "create_vanilla_platform",
    "default_adapter_registry",
    "detect_framework",
    "design",
]
