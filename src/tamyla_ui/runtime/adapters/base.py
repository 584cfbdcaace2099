"""Adapter capability shared by every rendering back end."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Protocol, runtime_checkable

from ...config import settings

__all__ = [
    "FrameworkAdapter",
    "COMPONENT_TYPES",
    "UnknownComponentError",
    "ComponentFactoryMissingError",
    "component_name",
    "enhance_props",
]

# Component type -> PascalCase component name (atoms, molecules, organisms, applications)
COMPONENT_TYPES: Dict[str, str] = {
    "button": "Button",
    "card": "Card",
    "input": "Input",
    "searchBar": "SearchBar",
    "actionCard": "ActionCard",
    "contentCard": "ContentCard",
    "notification": "Notification",
    "fileList": "FileList",
    "dashboard": "Dashboard",
    "searchInterface": "SearchInterface",
    "contentManager": "ContentManager",
    "enhancedSearch": "EnhancedSearch",
    "campaignSelector": "CampaignSelector",
}


class UnknownComponentError(KeyError):
    """Raised by an adapter for a component type it does not know."""


class ComponentFactoryMissingError(LookupError):
    """Raised when the backing component library lacks a known component."""


@runtime_checkable
class FrameworkAdapter(Protocol):  # pragma: no cover - structural protocol
    def create_component(self, type: str, props: Mapping[str, Any]) -> Any: ...

    def update_theme(self, theme: Mapping[str, Any]) -> None: ...

    def update_tokens(self, tokens: Mapping[str, Any]) -> None: ...

    def get_framework(self) -> str: ...


def component_name(type: str) -> str:
    try:
        return COMPONENT_TYPES[type]
    except KeyError:
        raise UnknownComponentError(f"Unknown component type: {type}") from None


def enhance_props(type: str, props: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Copy ``props`` and prepend the ``<prefix>-<type>`` class name."""
    enhanced = dict(props or {})
    extra = enhanced.get("className") or ""
    enhanced["className"] = f"{settings.CSS_PREFIX}-{type} {extra}".strip()
    return enhanced
