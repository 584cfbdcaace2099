"""Infrastructure services: event bus, adapter registry, log capture."""

from .event_bus import EventBus, PlatformEvent, Event, Subscription  # noqa: F401
from .adapter_registry import (  # noqa: F401
    AdapterRegistry,
    AdapterAlreadyRegisteredError,
    AdapterNotFoundError,
)
from .logging_service import LoggingService, LogEntry  # noqa: F401
