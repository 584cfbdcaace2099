"""Default design token loading.

Responsibilities:
- Load the bundled token tree (``tokens.json``) or an explicit override file.
- Spot-check the groups the built-in themes are projected from.

Usage:
    from tamyla_ui.design import load_default_tokens
    tree = load_default_tokens()
"""

from __future__ import annotations

import json
from copy import deepcopy
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

_TOKEN_FILE = Path(__file__).parent / "tokens.json"

# Paths the default theme projection reads; see theme_registry.project_default_theme
_REQUIRED_PATHS: tuple[tuple[str, ...], ...] = (
    ("colors", "primary"),
    ("colors", "gray500"),
    ("spacing", "2"),
    ("spacing", "8"),
    ("typography", "fontFamily", "sans"),
    ("typography", "fontSize"),
    ("typography", "fontWeight"),
    ("shadows", "lg"),
)


class TokenValidationError(RuntimeError):
    """Raised when a token file is missing groups the built-in themes rely on."""


def load_default_tokens(path: str | Path | None = None) -> Dict[str, Any]:
    """Return a fresh copy of the default token tree.

    Parameters
    ----------
    path: optional explicit token file; defaults to the bundled ``tokens.json``.
    """
    token_path = Path(path) if path else _TOKEN_FILE
    return deepcopy(_read_tokens(str(token_path)))


@lru_cache(maxsize=8)
def _read_tokens(token_path: str) -> Dict[str, Any]:
    p = Path(token_path)
    if not p.exists():
        raise FileNotFoundError(f"Design token file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    _validate_tokens(data)
    return data


def _validate_tokens(data: Any) -> None:
    if not isinstance(data, Mapping):
        raise TokenValidationError("Token file root must be an object")
    for path in _REQUIRED_PATHS:
        node: Any = data
        for part in path:
            if not isinstance(node, Mapping) or part not in node:
                raise TokenValidationError(f"Missing token path: {'.'.join(path)}")
            node = node[part]


__all__ = ["load_default_tokens", "TokenValidationError"]
