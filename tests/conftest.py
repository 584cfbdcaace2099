# Shared fixtures. Provides a fallback 'qtbot' fixture if pytest-qt is not installed
# so the Qt surface/adapter tests still run with a bare QApplication.

import os
import sys
import contextlib

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tamyla_ui.design import InMemoryStyleSurface, ThemeRegistry, TokenStore  # noqa: E402
from tamyla_ui.services import EventBus  # noqa: E402

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except Exception:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except Exception:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        app = QApplication.instance() or QApplication(sys.argv)  # type: ignore  # noqa: F841
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        yield Bot()
        for w in widgets:
            w.deleteLater()


@pytest.fixture()
def bus():
    return EventBus()


@pytest.fixture()
def store(bus):
    return TokenStore(bus=bus)


@pytest.fixture()
def registry(store, bus):
    return ThemeRegistry(store, bus=bus)


@pytest.fixture()
def surface():
    return InMemoryStyleSurface()
