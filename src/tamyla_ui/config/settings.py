"""Global configuration and constants for the UI platform."""

from __future__ import annotations

import os
from typing import Final

VERSION: Final = "1.0.0"
CSS_PREFIX: Final = "tmyl"
PACKAGE_LOGGER: Final = "tamyla_ui"

DEFAULT_THEME: Final = "default"
DEFAULT_FRAMEWORK: Final = os.environ.get("TAMYLA_UI_FRAMEWORK", "auto")
AUTO_FRAMEWORK: Final = "auto"

# Ring buffer size for LoggingService
LOG_CAPACITY: Final = int(os.environ.get("TAMYLA_UI_LOG_CAPACITY", "200"))
