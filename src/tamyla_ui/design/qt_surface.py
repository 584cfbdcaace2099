"""Qt style surface backed by a root `QWidget`.

Qt style sheets have no CSS custom properties, so this surface keeps the
variables itself and resolves ``var(--name)`` / ``var(--name, fallback)``
references in a QSS template whenever a variable changes. Each variable is
also mirrored as a dynamic property on the root widget so child widgets and
QSS attribute selectors can read it.

Root class names live in the ``class`` dynamic property (space separated),
which QSS can target with ``[class~="tmyl-theme-dark"]``.
"""

from __future__ import annotations

import re
from typing import Dict, List

from PyQt6.QtWidgets import QWidget

__all__ = ["QtStyleSurface", "resolve_variables", "rem_to_px"]

_VAR_RE = re.compile(r"var\(\s*(--[\w-]+)\s*(?:,\s*([^()]*?))?\s*\)")
_REM_RE = re.compile(r"(-?\d*\.?\d+)rem\b")
REM_PX = 16  # Qt has no rem unit; resolve against a 16px root

DEFAULT_TEMPLATE = """
QWidget {
    background: var(--tmyl-color-background, #ffffff);
    color: var(--tmyl-color-text, #212529);
}
QPushButton {
    background: var(--tmyl-color-primary, #007bff);
    color: var(--tmyl-color-surface, #ffffff);
    border-radius: var(--tmyl-radius-md, 0.375rem);
    padding: 4px 8px;
}
QLineEdit {
    background: var(--tmyl-color-surface, #ffffff);
    color: var(--tmyl-color-text, #212529);
    border: 1px solid var(--tmyl-color-neutral, #6c757d);
}
QFrame[tmylComponent="card"] {
    background: var(--tmyl-color-surface, #ffffff);
    border: 1px solid var(--tmyl-color-neutral, #6c757d);
}
""".strip()


def resolve_variables(template: str, variables: Dict[str, str]) -> str:
    """Replace ``var(--x)`` references; unknown names use the fallback or vanish."""

    def _sub(match: re.Match[str]) -> str:
        name, fallback = match.group(1), match.group(2)
        if name in variables:
            value = variables[name]
        else:
            value = fallback.strip() if fallback else ""
        return rem_to_px(value)

    return _VAR_RE.sub(_sub, template)


def rem_to_px(value: str) -> str:
    def _px(match: re.Match[str]) -> str:
        px = float(match.group(1)) * REM_PX
        return f"{int(px) if px.is_integer() else round(px, 2)}px"

    return _REM_RE.sub(_px, value)


class QtStyleSurface:
    def __init__(self, root: QWidget, template: str = DEFAULT_TEMPLATE) -> None:
        self._root = root
        self._template = template
        self._variables: Dict[str, str] = {}
        self._classes: List[str] = []

    @property
    def root(self) -> QWidget:
        return self._root

    def set_variable(self, name: str, value: str) -> None:
        if self._variables.get(name) == value:
            return
        self._variables[name] = value
        self._root.setProperty(name, value)
        self._refresh_stylesheet()

    def get_variable(self, name: str) -> str | None:
        return self._variables.get(name)

    def add_class(self, name: str) -> None:
        if name not in self._classes:
            self._classes.append(name)
            self._sync_classes()

    def remove_class(self, name: str) -> None:
        if name in self._classes:
            self._classes.remove(name)
            self._sync_classes()

    def class_names(self) -> List[str]:
        return list(self._classes)

    def set_template(self, template: str) -> None:
        self._template = template
        self._refresh_stylesheet()

    # Internal ------------------------------------------------------------
    def _refresh_stylesheet(self) -> None:
        self._root.setStyleSheet(resolve_variables(self._template, self._variables))

    def _sync_classes(self) -> None:
        self._root.setProperty("class", " ".join(self._classes))
        # Property selectors are only re-evaluated on polish
        style = self._root.style()
        if style is not None:
            style.unpolish(self._root)
            style.polish(self._root)
