"""Platform configuration records.

`PlatformConfig` is fixed for the lifetime of a `Platform`; changing the
framework requires a new instance. Use `with_defaults` to build one from a
partial set of keyword overrides (mirrors `Platform.with_defaults`).
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Mapping

from . import settings

__all__ = ["FeatureFlags", "PlatformConfig"]


@dataclass(frozen=True)
class FeatureFlags:
    animations: bool = True
    accessibility: bool = True
    dark_mode: bool = True
    rtl: bool = False


@dataclass(frozen=True)
class PlatformConfig:
    framework: str = settings.DEFAULT_FRAMEWORK
    theme: str = settings.DEFAULT_THEME
    tokens: Mapping[str, Any] = field(default_factory=dict)
    features: FeatureFlags = field(default_factory=FeatureFlags)

    @classmethod
    def with_defaults(cls, **overrides: Any) -> "PlatformConfig":
        """Build a config from keyword overrides.

        ``features`` may be given as a `FeatureFlags` or a plain mapping of
        flag overrides; unknown keyword names raise ``TypeError``.
        """
        features = overrides.pop("features", None)
        if isinstance(features, Mapping):
            features = FeatureFlags(**features)
        if features is not None:
            overrides["features"] = features
        if "tokens" in overrides:
            overrides["tokens"] = deepcopy(dict(overrides["tokens"] or {}))
        return cls(**overrides)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
