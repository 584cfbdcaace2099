"""Live style surfaces.

A surface is whatever the emitted variables land on: a document root in a
browser host, a Qt root widget (see `qt_surface`), or the in-memory surface
below for headless hosts and tests. Every call site treats a missing surface
(``None``) as "nothing to apply".

A surface may also offer ``class_names()``; when it does, stale theme classes
are found by listing the root classes, otherwise only the previously active
theme class is removed.
"""

from __future__ import annotations

from typing import Dict, List, Protocol, runtime_checkable

__all__ = ["StyleSurface", "InMemoryStyleSurface"]


@runtime_checkable
class StyleSurface(Protocol):  # pragma: no cover - structural protocol
    def set_variable(self, name: str, value: str) -> None: ...

    def add_class(self, name: str) -> None: ...

    def remove_class(self, name: str) -> None: ...


class InMemoryStyleSurface:
    """Records variables and root class names; last write wins."""

    def __init__(self) -> None:
        self.variables: Dict[str, str] = {}
        self._classes: List[str] = []
        self.writes = 0

    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value
        self.writes += 1

    def add_class(self, name: str) -> None:
        if name not in self._classes:
            self._classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self._classes:
            self._classes.remove(name)

    def class_names(self) -> List[str]:
        return list(self._classes)

    def get_variable(self, name: str) -> str | None:
        return self.variables.get(name)
