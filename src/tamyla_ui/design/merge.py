"""Structural deep merge shared by the token store and the theme registry."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping

__all__ = ["deep_merge"]


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``source`` merged over ``target``.

    Mapping values merge key-by-key (union of keys, ``source`` wins); a
    missing or non-mapping target value is treated as an empty mapping.
    Every other value, lists and ``None`` included, overwrites. Neither
    argument is mutated and the result shares no containers with them.
    """
    result: Dict[str, Any] = {k: deepcopy(v) for k, v in target.items()}
    for key, value in source.items():
        if isinstance(value, Mapping):
            base = result.get(key)
            result[key] = deep_merge(base if isinstance(base, Mapping) else {}, value)
        else:
            result[key] = deepcopy(value)
    return result
