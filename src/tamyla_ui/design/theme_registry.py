"""Theme registry: named theme records and the active-theme pointer.

A theme record is a flattened, self-contained snapshot (concrete values, not
overrides) with the fields ``name``, ``colors``, ``spacing``, ``typography``
(``fontFamily``/``fontSize``/``fontWeight``), ``borderRadius``, ``shadows``
and ``breakpoints``.

Construction reads the token store once and registers five built-ins:
``default``, ``light`` (same values as default), ``dark``, ``professional``
and ``trading``. Later token updates do not re-synthesize them.

Failure policy
--------------
- `set_theme` with an unknown name is soft: a warning is logged and the
  active theme falls back to ``default``.
- `create_theme` with an unknown base is hard: `ThemeNotFoundError`, and
  nothing is registered.

The registry never touches a style surface. Activation publishes
``PlatformEvent.THEME_CHANGED`` on the bus (if one was given) and a
`StyleApplier` subscribed there does the presentation work.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from threading import RLock
from typing import Any, Dict, List, Mapping, Optional

from ..config import settings
from ..services.event_bus import EventBus, PlatformEvent
from .merge import deep_merge
from .style_emitter import render_theme_css
from .theme_presets import built_in_overlays
from .token_store import TokenStore

__all__ = [
    "ThemeRegistry",
    "ThemeRecord",
    "ThemeNotFoundError",
    "project_default_theme",
]

_logger = logging.getLogger(__name__)

ThemeRecord = Dict[str, Any]

DEFAULT_THEME = settings.DEFAULT_THEME


class ThemeNotFoundError(KeyError):
    """Raised when a theme is derived from a base that is not registered."""


def project_default_theme(tokens: Mapping[str, Any], name: str = DEFAULT_THEME) -> ThemeRecord:
    """Build the default theme record from a token tree.

    This is a fixed field-to-path projection, not a generic flatten; spacing
    steps are renamed (``spacing[2]`` -> ``xs`` ...) and ``fontFamily``
    collapses to the sans stack.
    """
    colors = tokens["colors"]
    spacing = tokens["spacing"]
    typography = tokens["typography"]
    font_size = typography["fontSize"]
    font_weight = typography["fontWeight"]
    shadows = tokens["shadows"]
    return {
        "name": name,
        "colors": {
            "primary": colors["primary"],
            "secondary": colors["secondary"],
            "success": colors["success"],
            "warning": colors["warning"],
            "error": colors["error"],
            "neutral": colors["gray500"],
            "background": colors["background"],
            "surface": colors["surface"],
            "text": colors["text"],
            "textSecondary": colors["textSecondary"],
        },
        "spacing": {
            "xs": spacing["2"],
            "sm": spacing["3"],
            "md": spacing["4"],
            "lg": spacing["6"],
            "xl": spacing["8"],
        },
        "typography": {
            "fontFamily": typography["fontFamily"]["sans"],
            "fontSize": {k: font_size[k] for k in ("xs", "sm", "md", "lg", "xl")},
            "fontWeight": {k: font_weight[k] for k in ("normal", "medium", "bold")},
        },
        # Radius and breakpoints are fixed, not token-driven
        "borderRadius": {"sm": "0.25rem", "md": "0.375rem", "lg": "0.5rem"},
        "shadows": {k: shadows[k] for k in ("sm", "md", "lg")},
        "breakpoints": {"mobile": "480px", "tablet": "768px", "desktop": "1024px"},
    }


class ThemeRegistry:
    def __init__(
        self,
        token_store: TokenStore,
        initial_theme: str = DEFAULT_THEME,
        *,
        bus: EventBus | None = None,
    ) -> None:
        self._lock = RLock()
        self._themes: Dict[str, ThemeRecord] = {}
        self._current: Optional[str] = None
        self._bus = bus
        self._initialize_default_themes(token_store.get_tokens())
        self.set_theme(initial_theme)

    # Active theme ------------------------------------------------------
    def get_current_theme(self) -> ThemeRecord:
        with self._lock:
            return deepcopy(self._themes[self._current or DEFAULT_THEME])

    @property
    def current_name(self) -> str:
        return self._current or DEFAULT_THEME

    def set_theme(self, name: str) -> bool:
        """Activate ``name``; returns False when it fell back to ``default``."""
        with self._lock:
            found = name in self._themes
            target = name if found else DEFAULT_THEME
            previous = self._current
            self._current = target
        if not found:
            _logger.warning('Theme "%s" not found. Using default theme.', name)
            # Surface only needs a refresh if the pointer actually moved
            if previous != target:
                self._publish_theme_changed(previous)
            return False
        self._publish_theme_changed(previous)
        return True

    # Registry ----------------------------------------------------------
    def register_theme(self, name: str, record: Mapping[str, Any]) -> None:
        """Store a copy of ``record`` under ``name`` (overwrites, built-ins included)."""
        stored = deepcopy(dict(record))
        stored["name"] = name
        with self._lock:
            self._themes[name] = stored
            is_current = name == self._current
        if self._bus is not None:
            self._bus.publish(PlatformEvent.THEME_REGISTERED, {"name": name})
        if is_current:
            self._publish_theme_changed(name)

    def get_available_themes(self) -> List[str]:
        with self._lock:
            return list(self._themes.keys())

    def get_theme(self, name: str) -> Optional[ThemeRecord]:
        with self._lock:
            record = self._themes.get(name)
            return deepcopy(record) if record is not None else None

    def create_theme(
        self,
        name: str,
        base_name: str = DEFAULT_THEME,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> ThemeRecord:
        """Derive ``name`` from ``base_name`` plus ``overrides`` and register it.

        Raises
        ------
        ThemeNotFoundError
            If ``base_name`` is not registered; nothing is registered then.
        """
        with self._lock:
            base = self._themes.get(base_name)
            if base is None:
                raise ThemeNotFoundError(f'Base theme "{base_name}" not found')
            record = deep_merge(base, overrides or {})
        record["name"] = name
        self.register_theme(name, record)
        return deepcopy(record)

    # CSS -----------------------------------------------------------------
    def generate_theme_css(self, name: Optional[str] = None) -> str:
        """Declaration block for ``name`` (current theme when omitted); "" if unknown."""
        record = self.get_current_theme() if name is None else self.get_theme(name)
        if record is None:
            return ""
        return render_theme_css(record)

    def generate_all_themes_css(self) -> str:
        return "\n\n".join(self.generate_theme_css(n) for n in self.get_available_themes())

    # Internal ----------------------------------------------------------
    def _initialize_default_themes(self, tokens: Mapping[str, Any]) -> None:
        default = project_default_theme(tokens)
        self._themes[DEFAULT_THEME] = default
        self._themes["light"] = dict(deepcopy(default), name="light")
        for variant, overlay in built_in_overlays(tokens).items():
            record = deep_merge(default, overlay)
            record["name"] = variant
            self._themes[variant] = record

    def _publish_theme_changed(self, previous: Optional[str]) -> None:
        if self._bus is None:
            return
        self._bus.publish(
            PlatformEvent.THEME_CHANGED,
            {"theme": self.get_current_theme(), "previous": previous},
        )
