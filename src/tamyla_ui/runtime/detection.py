"""Framework detection for ``framework="auto"``.

A detector is any zero-argument callable returning a framework tag.
`Platform` calls it exactly once, at construction. The default detector runs
the probes below in order and falls back to ``"vanilla"``:

1. GUI scope: a Qt application object is already running in this process.
2. Module scope: ``PyQt6.QtWidgets`` has been imported by the host.

Probes only inspect ``sys.modules``; they never import Qt themselves, and a
probe that raises counts as "not present".
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Optional, Tuple

__all__ = [
    "Detector",
    "Probe",
    "DEFAULT_PROBES",
    "BASELINE_FRAMEWORK",
    "detect_framework",
    "make_detector",
    "gui_scope_probe",
    "module_scope_probe",
]

_logger = logging.getLogger(__name__)

Detector = Callable[[], str]
Probe = Tuple[str, Callable[[], bool]]

BASELINE_FRAMEWORK = "vanilla"
_QT_WIDGETS = "PyQt6.QtWidgets"


def gui_scope_probe() -> bool:
    widgets = sys.modules.get(_QT_WIDGETS)
    if widgets is None:
        return False
    return widgets.QApplication.instance() is not None


def module_scope_probe() -> bool:
    return _QT_WIDGETS in sys.modules


DEFAULT_PROBES: tuple[Probe, ...] = (
    ("qt", gui_scope_probe),
    ("qt", module_scope_probe),
)


def detect_framework(probes: Optional[Iterable[Probe]] = None) -> str:
    for framework, probe in DEFAULT_PROBES if probes is None else probes:
        try:
            present = probe()
        except Exception as exc:  # noqa: BLE001 - a broken probe means "absent"
            _logger.debug("probe %s failed: %r", getattr(probe, "__name__", probe), exc)
            continue
        if present:
            return framework
    return BASELINE_FRAMEWORK


def make_detector(probes: Iterable[Probe]) -> Detector:
    fixed = tuple(probes)
    return lambda: detect_framework(fixed)
