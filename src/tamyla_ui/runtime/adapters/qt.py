"""Qt adapter (framework tag ``"qt"``).

Builds PyQt6 widgets for the platform's component types. Atoms map to native
widgets; composite components are placeholder frames until a real widget
library is plugged in through ``widget_factories``.

Every created widget carries ``tmylComponent`` (component type), ``class``
(enhanced class names) and ``tmylTheme`` dynamic properties so QSS selectors
can target them. Widgets are tracked weakly; `update_theme` re-tags and
re-polishes the live ones.

The adapter creates a ``QApplication`` on first use when the host has not
started one yet (Qt aborts the process if a widget precedes the application).
"""

from __future__ import annotations

import logging
import sys
import weakref
from typing import Any, Callable, Dict, Mapping, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...config.platform_config import PlatformConfig
from .base import component_name, enhance_props

__all__ = ["QtAdapter", "ensure_application"]

_logger = logging.getLogger(__name__)

WidgetFactory = Callable[[Mapping[str, Any]], QWidget]


# Keeps an adapter-created application alive; PyQt destroys it with the wrapper
_owned_app: Optional[QApplication] = None


def ensure_application() -> QApplication:
    global _owned_app
    app = QApplication.instance()
    if app is None:
        _logger.info("no QApplication running; creating one for the qt adapter")
        app = _owned_app = QApplication(sys.argv[:1])  # minimal argv
    return app


def _button(props: Mapping[str, Any]) -> QWidget:
    w = QPushButton(str(props.get("text", "")))
    w.setEnabled(not props.get("disabled", False))
    return w


def _input(props: Mapping[str, Any]) -> QWidget:
    w = QLineEdit()
    w.setPlaceholderText(str(props.get("placeholder", "")))
    if props.get("value") is not None:
        w.setText(str(props["value"]))
    w.setEnabled(not props.get("disabled", False))
    return w


def _card(props: Mapping[str, Any]) -> QWidget:
    frame = QFrame()
    frame.setFrameShape(QFrame.Shape.StyledPanel)
    layout = QVBoxLayout(frame)
    for key in ("title", "content"):
        if props.get(key):
            label = QLabel(str(props[key]))
            label.setObjectName(f"tmylCard{key.capitalize()}")
            layout.addWidget(label)
    return frame


def _placeholder(type: str) -> WidgetFactory:
    def _create(props: Mapping[str, Any]) -> QWidget:
        frame = QFrame()
        frame.setObjectName("tmylMockComponent")
        layout = QVBoxLayout(frame)
        layout.addWidget(QLabel(f"Mock {component_name(type)} component"))
        return frame

    return _create


class QtAdapter:
    framework = "qt"

    def __init__(
        self,
        config: PlatformConfig,
        widget_factories: Optional[Mapping[str, WidgetFactory]] = None,
    ) -> None:
        self.config = config
        self._factories: Dict[str, WidgetFactory] = {
            "button": _button,
            "input": _input,
            "card": _card,
        }
        if widget_factories:
            self._factories.update(widget_factories)
        self._widgets: "weakref.WeakSet[QWidget]" = weakref.WeakSet()
        self.theme_name: Optional[str] = None
        self.tokens: Dict[str, Any] = {}

    def create_component(self, type: str, props: Mapping[str, Any] | None = None) -> QWidget:
        component_name(type)  # raises for unknown types
        ensure_application()
        enhanced = enhance_props(type, props)
        factory = self._factories.get(type) or _placeholder(type)
        widget = factory(enhanced)
        widget.setProperty("tmylComponent", type)
        widget.setProperty("class", enhanced["className"])
        theme = enhanced.get("theme")
        if isinstance(theme, Mapping):
            self.theme_name = theme.get("name", self.theme_name)
        if self.theme_name:
            widget.setProperty("tmylTheme", self.theme_name)
        if self.config.features.rtl:
            widget.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        self._widgets.add(widget)
        return widget

    def update_theme(self, theme: Mapping[str, Any]) -> None:
        self.theme_name = theme.get("name")
        for widget in list(self._widgets):
            widget.setProperty("tmylTheme", self.theme_name)
            style = widget.style()
            if style is not None:
                style.unpolish(widget)
                style.polish(widget)
        _logger.debug("qt adapter theme -> %s (%d widgets)", self.theme_name, len(self._widgets))

    def update_tokens(self, tokens: Mapping[str, Any]) -> None:
        self.tokens = dict(tokens)

    def get_framework(self) -> str:
        return self.framework

    def live_widget_count(self) -> int:
        return len(self._widgets)
