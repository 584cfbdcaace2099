"""Built-in theme variant overrides.

Each preset is a partial theme record deep-merged over the token-derived
``default`` theme at registry construction. Only colors differ between the
built-ins; spacing, typography and the rest come from ``default``.

``dark`` reads its neutrals from the token tree so that custom tokens passed
to the store flow into it; ``professional`` and ``trading`` use fixed brand
values.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

OverlayMap = Dict[str, Any]

_PROFESSIONAL: OverlayMap = {
    "colors": {
        "primary": "#2563eb",
        "secondary": "#64748b",
        "background": "#fafafa",
        "surface": "#ffffff",
    },
}

# Financial dashboards
_TRADING: OverlayMap = {
    "colors": {
        "primary": "#059669",
        "secondary": "#0f172a",
        "success": "#10b981",
        "error": "#ef4444",
        "warning": "#f59e0b",
        "background": "#0f172a",
        "surface": "#1e293b",
        "text": "#f1f5f9",
        "textSecondary": "#94a3b8",
    },
}


def _dark(tokens: Mapping[str, Any]) -> OverlayMap:
    colors = tokens.get("colors", {})
    return {
        "colors": {
            "background": colors.get("gray900"),
            "surface": colors.get("gray800"),
            "text": colors.get("textInverse"),
            "textSecondary": colors.get("gray300"),
            "neutral": colors.get("gray400"),
        },
    }


def built_in_overlays(tokens: Mapping[str, Any]) -> Dict[str, OverlayMap]:
    """Variant name -> override record, in registration order."""
    return {
        "dark": _dark(tokens),
        "professional": _PROFESSIONAL,
        "trading": _TRADING,
    }


__all__ = ["built_in_overlays", "OverlayMap"]
