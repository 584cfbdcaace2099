"""Logging service: in-process capture of recent platform log records.

Attaches a handler to the package logger (``tamyla_ui`` by default) and keeps
the most recent records in a ring buffer. When constructed with an
`EventBus`, each record is also published as
`PlatformEvent.LOG_RECORD_ADDED` so a diagnostics panel can follow along.

`Platform.debug()` includes `recent()` entries when a service is supplied.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, asdict
from threading import RLock
from typing import Deque, List, Optional

from ..config import settings
from .event_bus import EventBus, PlatformEvent

__all__ = ["LogEntry", "LoggingService"]


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float
    lineno: int

    def to_dict(self) -> dict:
        return asdict(self)


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__()
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(
        self,
        capacity: int = settings.LOG_CAPACITY,
        *,
        bus: EventBus | None = None,
        logger_name: str = settings.PACKAGE_LOGGER,
    ) -> None:
        self._capacity = capacity
        self._bus = bus
        self._logger_name = logger_name
        self._lock = RLock()
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._handler.setLevel(logging.DEBUG)
        self._attached = False
        self._previous_level: int | None = None
        self._publishing = False

    # Lifecycle --------------------------------------------------------
    def attach(self, level: int = logging.DEBUG) -> None:
        if self._attached:
            return
        logger = logging.getLogger(self._logger_name)
        logger.addHandler(self._handler)
        self._previous_level = logger.level
        # Don't raise an already lower threshold
        if logger.level == logging.NOTSET or logger.level > level:
            logger.setLevel(level)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        logger = logging.getLogger(self._logger_name)
        logger.removeHandler(self._handler)
        if self._previous_level is not None:
            logger.setLevel(self._previous_level)
            self._previous_level = None
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    # Internal ingestion -----------------------------------------------
    def _ingest_record(self, record: logging.LogRecord) -> None:
        entry = LogEntry(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
            lineno=record.lineno,
        )
        with self._lock:
            self._entries.append(entry)
            # Records logged by LOG_RECORD_ADDED handlers are kept, not re-published
            if self._bus is None or self._publishing:
                return
            self._publishing = True
        try:
            self._bus.publish(
                PlatformEvent.LOG_RECORD_ADDED,
                {"level": entry.level, "name": entry.name, "message": entry.message[:120]},
            )
        finally:
            with self._lock:
                self._publishing = False

    # Query ------------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        with self._lock:
            data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(
        self, *, level: str | None = None, name_contains: str | None = None
    ) -> List[LogEntry]:
        out: List[LogEntry] = []
        for e in self.recent():
            if level and e.level != level:
                continue
            if name_contains and name_contains not in e.name:
                continue
            out.append(e)
        return out

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
