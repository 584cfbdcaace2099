"""Framework name -> adapter factory registry.

A `Platform` resolves its framework tag through one of these at construction
time. Registries are plain objects: build one per host (or use
`tamyla_ui.runtime.adapters.default_adapter_registry()`) and pass it in;
there is no process-wide instance.

Usage pattern:
    registry = AdapterRegistry()
    registry.register("vanilla", VanillaAdapter)
    adapter = registry.create("vanilla", config)

In tests:
    registry.register("vanilla", FakeAdapter, allow_override=True)
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Dict, Iterable

__all__ = [
    "AdapterRegistry",
    "AdapterFactory",
    "AdapterAlreadyRegisteredError",
    "AdapterNotFoundError",
]

AdapterFactory = Callable[[Any], Any]


class AdapterAlreadyRegisteredError(RuntimeError):
    """Raised when registering an existing framework without allow_override."""


class AdapterNotFoundError(KeyError):
    """Raised when no factory is registered for a framework tag."""


@dataclass
class AdapterRecord:
    framework: str
    factory: AdapterFactory
    origin: str | None = None  # optional metadata (e.g., registering module)


class AdapterRegistry:
    """Thread-safe registry of adapter factories keyed by framework tag."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._records: Dict[str, AdapterRecord] = {}

    def register(
        self,
        framework: str,
        factory: AdapterFactory,
        *,
        allow_override: bool = False,
        origin: str | None = None,
    ) -> None:
        """Register an adapter factory.

        Parameters
        ----------
        framework : str
            Framework tag (``"vanilla"``, ``"qt"``, ...).
        factory : callable
            Called with the `PlatformConfig` to build the adapter.
        allow_override : bool
            If False, raises if the tag already exists; if True, overwrites.
        origin : str | None
            Optional metadata describing who registered the factory.
        """
        with self._lock:
            if framework in self._records and not allow_override:
                raise AdapterAlreadyRegisteredError(
                    f"Adapter '{framework}' already registered"
                )
            self._records[framework] = AdapterRecord(framework, factory, origin)

    def get(self, framework: str) -> AdapterFactory:
        with self._lock:
            record = self._records.get(framework)
            if record is None:
                raise AdapterNotFoundError(framework)
            return record.factory

    def try_get(self, framework: str, default: Any = None) -> Any:
        with self._lock:
            record = self._records.get(framework)
            return record.factory if record else default

    def create(self, framework: str, config: Any) -> Any:
        return self.get(framework)(config)

    def unregister(self, framework: str) -> None:
        with self._lock:
            self._records.pop(framework, None)

    def list_frameworks(self) -> Iterable[str]:
        with self._lock:
            return list(self._records.keys())

    def __contains__(self, framework: object) -> bool:
        with self._lock:
            return framework in self._records
