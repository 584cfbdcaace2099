"""Runtime dispatch: framework detection, adapters and the `Platform`."""

from .detection import detect_framework, make_detector  # noqa: F401
from .platform import (  # noqa: F401
    Platform,
    UnsupportedFrameworkError,
    create_platform,
    create_qt_platform,
    create_vanilla_platform,
)
from .adapters import default_adapter_registry  # noqa: F401
