"""Style emission: token trees and theme records -> CSS custom properties.

Two outputs are produced from the same declaration lists:

- text (``render_theme_css`` / ``render_root_css``) for a downstream style
  pipeline, and
- live application onto a `StyleSurface` (``apply_theme`` / ``apply_tokens``).

Theme declarations always follow the block layout below; downstream
pipelines depend on this order, so it is never sorted::

    .tmyl-theme-<name> {
      --tmyl-color-<key>: <value>;
      --tmyl-spacing-<key>: <value>;
      --tmyl-font-family: <value>;
      --tmyl-font-size-<key>: <value>;
      --tmyl-font-weight-<key>: <value>;
      --tmyl-radius-<key>: <value>;
      --tmyl-shadow-<key>: <value>;
    }

`StyleApplier` is the bus-driven side of this module: the registry and store
only publish notifications, the applier owns the surface writes.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..config import settings
from ..services.event_bus import Event, EventBus, PlatformEvent, Subscription
from .style_surface import StyleSurface

__all__ = [
    "Declaration",
    "css_value",
    "flatten_tokens",
    "theme_declarations",
    "token_declarations",
    "render_theme_css",
    "render_root_css",
    "theme_class",
    "apply_theme",
    "apply_tokens",
    "StyleApplier",
]

_logger = logging.getLogger(__name__)

Declaration = Tuple[str, Any]

_PREFIX = settings.CSS_PREFIX


def css_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_tokens(tree: Mapping[str, Any], prefix: str = "") -> List[Declaration]:
    """Flatten a token tree into ``(dash-joined-path, value)`` pairs.

    Categories and tokens are visited in stored insertion order.
    """
    out: List[Declaration] = []
    for key, value in tree.items():
        if isinstance(value, Mapping):
            out.extend(flatten_tokens(value, f"{prefix}{key}-"))
        else:
            out.append((f"{prefix}{key}", value))
    return out


def token_declarations(tree: Mapping[str, Any]) -> List[Declaration]:
    return [(f"--{_PREFIX}-{name}", value) for name, value in flatten_tokens(tree)]


def theme_declarations(theme: Mapping[str, Any]) -> List[Declaration]:
    """Ordered ``(variable, value)`` pairs for one theme record.

    Missing sections are skipped rather than treated as errors so partially
    registered records still emit what they have.
    """
    out: List[Declaration] = []

    def _section(var: str, group: Any) -> None:
        if isinstance(group, Mapping):
            for key, value in group.items():
                out.append((f"--{_PREFIX}-{var}-{key}", value))

    _section("color", theme.get("colors"))
    _section("spacing", theme.get("spacing"))
    typography = theme.get("typography") or {}
    if "fontFamily" in typography:
        out.append((f"--{_PREFIX}-font-family", typography["fontFamily"]))
    _section("font-size", typography.get("fontSize"))
    _section("font-weight", typography.get("fontWeight"))
    _section("radius", theme.get("borderRadius"))
    _section("shadow", theme.get("shadows"))
    return out


def theme_class(name: str) -> str:
    return f"{_PREFIX}-theme-{name}"


def _block(selector: str, declarations: Iterable[Declaration]) -> List[str]:
    lines = [f"{selector} {{"]
    lines.extend(f"  {var}: {css_value(value)};" for var, value in declarations)
    lines.append("}")
    return lines


def render_theme_css(theme: Mapping[str, Any]) -> str:
    name = theme.get("name", "")
    lines = [f"/* {name} theme */"]
    lines.extend(_block(f".{theme_class(name)}", theme_declarations(theme)))
    return "\n".join(lines)


def render_root_css(tree: Mapping[str, Any]) -> str:
    return "\n".join(_block(":root", token_declarations(tree)))


# Live application ---------------------------------------------------------
def apply_theme(
    surface: Optional[StyleSurface],
    theme: Mapping[str, Any],
    previous: Optional[str] = None,
) -> int:
    """Write a theme's variables to ``surface`` and swap the root theme class.

    ``previous`` names the theme being replaced; it is only consulted for
    surfaces that cannot list their classes.

    Returns the number of variables written (0 when no surface is attached).
    """
    if surface is None:
        return 0
    decls = theme_declarations(theme)
    for var, value in decls:
        surface.set_variable(var, css_value(value))
    list_classes = getattr(surface, "class_names", None)
    if callable(list_classes):
        stale = [c for c in list_classes() if c.startswith(f"{_PREFIX}-theme-")]
    else:
        stale = [theme_class(previous)] if previous else []
    for cls in stale:
        surface.remove_class(cls)
    surface.add_class(theme_class(theme.get("name", "")))
    return len(decls)


def apply_tokens(surface: Optional[StyleSurface], tree: Mapping[str, Any]) -> int:
    if surface is None:
        return 0
    decls = token_declarations(tree)
    for var, value in decls:
        surface.set_variable(var, css_value(value))
    return len(decls)


class StyleApplier:
    """Applies theme/token notifications from an `EventBus` to a surface.

    Payload contract: ``THEME_CHANGED`` carries ``{"theme": record, ...}``
    and ``TOKENS_UPDATED`` carries ``{"tokens": tree}``.
    """

    def __init__(self, surface: Optional[StyleSurface]) -> None:
        self.surface = surface
        self._subs: List[Subscription] = []
        self._bus: EventBus | None = None

    def attach(self, bus: EventBus) -> "StyleApplier":
        if self._bus is not None:
            self.detach()
        self._bus = bus
        self._subs = [
            bus.subscribe(PlatformEvent.THEME_CHANGED, self._on_theme_changed),
            bus.subscribe(PlatformEvent.TOKENS_UPDATED, self._on_tokens_updated),
        ]
        return self

    def detach(self) -> None:
        if self._bus is None:
            return
        for sub in self._subs:
            self._bus.unsubscribe(sub)
        self._subs = []
        self._bus = None

    @property
    def attached(self) -> bool:
        return self._bus is not None

    def _on_theme_changed(self, evt: Event) -> None:
        theme = (evt.payload or {}).get("theme")
        if theme is None:
            return
        written = apply_theme(self.surface, theme, evt.payload.get("previous"))
        _logger.debug("applied theme %r (%d variables)", theme.get("name"), written)

    def _on_tokens_updated(self, evt: Event) -> None:
        tokens = (evt.payload or {}).get("tokens")
        if tokens is None:
            return
        written = apply_tokens(self.surface, tokens)
        _logger.debug("applied tokens (%d variables)", written)
