"""Configuration package (constants + platform config records)."""

from . import settings  # noqa: F401
from .platform_config import FeatureFlags, PlatformConfig  # noqa: F401

__all__ = ["settings", "FeatureFlags", "PlatformConfig"]
