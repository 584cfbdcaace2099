import sys
import types

from tamyla_ui.runtime import detect_framework, make_detector
from tamyla_ui.runtime.detection import gui_scope_probe, module_scope_probe


def test_no_probe_matches_falls_back_to_vanilla():
    assert detect_framework([("qt", lambda: False), ("qt", lambda: False)]) == "vanilla"
    assert detect_framework([]) == "vanilla"


def test_probe_order_is_respected():
    calls = []

    def first():
        calls.append("gui")
        return False

    def second():
        calls.append("module")
        return True

    assert detect_framework([("qt", first), ("other", second)]) == "other"
    assert calls == ["gui", "module"]


def test_failing_probe_counts_as_absent():
    def broken():
        raise RuntimeError("probe exploded")

    assert detect_framework([("qt", broken)]) == "vanilla"


def test_make_detector_reuses_fixed_probes():
    detector = make_detector([("qt", lambda: True)])
    assert detector() == "qt"


def test_default_probes_without_qt_loaded(monkeypatch):
    monkeypatch.delitem(sys.modules, "PyQt6.QtWidgets", raising=False)
    assert gui_scope_probe() is False
    assert module_scope_probe() is False
    assert detect_framework() == "vanilla"


def test_gui_scope_probe_sees_running_application(monkeypatch):
    app = object()
    fake = types.SimpleNamespace(
        QApplication=types.SimpleNamespace(instance=staticmethod(lambda: app))
    )
    monkeypatch.setitem(sys.modules, "PyQt6.QtWidgets", fake)
    assert gui_scope_probe() is True
    assert detect_framework() == "qt"


def test_module_scope_probe_without_application(monkeypatch):
    fake = types.SimpleNamespace(
        QApplication=types.SimpleNamespace(instance=staticmethod(lambda: None))
    )
    monkeypatch.setitem(sys.modules, "PyQt6.QtWidgets", fake)
    assert gui_scope_probe() is False
    assert module_scope_probe() is True
    assert detect_framework() == "qt"
