"""Design token store.

Holds one hierarchical token tree (category -> token -> scalar, with
``typography`` one level deeper) seeded from the bundled defaults. The only
mutation is `update_tokens`, a structural deep merge; nothing handed out by
the store aliases its internal tree.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional

from ..services.event_bus import EventBus, PlatformEvent
from .loader import load_default_tokens
from .merge import deep_merge
from .style_emitter import Declaration, flatten_tokens, render_root_css

__all__ = ["TokenStore", "TokenTree"]

_logger = logging.getLogger(__name__)

TokenTree = Dict[str, Any]


class TokenStore:
    def __init__(
        self,
        custom_tokens: Optional[Mapping[str, Any]] = None,
        *,
        defaults: Optional[Mapping[str, Any]] = None,
        bus: EventBus | None = None,
    ) -> None:
        base = deepcopy(dict(defaults)) if defaults is not None else load_default_tokens()
        self._tokens: TokenTree = deep_merge(base, custom_tokens or {})
        self._bus = bus

    # Snapshot ------------------------------------------------------------
    def get_tokens(self) -> TokenTree:
        return deepcopy(self._tokens)

    def update_tokens(self, partial: Mapping[str, Any]) -> None:
        """Deep-merge ``partial`` into the tree.

        Unknown categories and tokens are added as-is; lists overwrite.
        Publishes ``TOKENS_UPDATED`` with the merged tree when a bus is set.
        """
        self._tokens = deep_merge(self._tokens, partial or {})
        _logger.debug("tokens updated: %s", ", ".join(map(str, (partial or {}).keys())) or "-")
        if self._bus is not None:
            self._bus.publish(PlatformEvent.TOKENS_UPDATED, {"tokens": self.get_tokens()})

    # Category accessors --------------------------------------------------
    def _category(self, name: str) -> Dict[str, Any]:
        return deepcopy(self._tokens.get(name, {}))

    def get_colors(self) -> Dict[str, Any]:
        return self._category("colors")

    def get_spacing(self) -> Dict[str, Any]:
        return self._category("spacing")

    def get_typography(self) -> Dict[str, Any]:
        return self._category("typography")

    def get_borders(self) -> Dict[str, Any]:
        return self._category("borders")

    def get_shadows(self) -> Dict[str, Any]:
        return self._category("shadows")

    def get_transitions(self) -> Dict[str, Any]:
        return self._category("transitions")

    def get_z_index(self) -> Dict[str, Any]:
        return self._category("zIndex")

    # Emission ------------------------------------------------------------
    def generate_style_declarations(self) -> List[Declaration]:
        """Dash-joined path -> value pairs, categories then tokens in stored order."""
        return flatten_tokens(self._tokens)

    def generate_css_custom_properties(self) -> str:
        return render_root_css(self._tokens)
