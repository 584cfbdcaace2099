import pytest

from tamyla_ui import (
    InMemoryStyleSurface,
    LoggingService,
    Platform,
    PlatformConfig,
    UnsupportedFrameworkError,
    create_platform,
    create_vanilla_platform,
    default_adapter_registry,
)
from tamyla_ui.runtime.adapters import Element
from tamyla_ui.services import AdapterRegistry


class RecordingAdapter:
    def __init__(self, config):
        self.config = config
        self.created = []
        self.themes = []
        self.tokens = []

    def create_component(self, type, props):
        self.created.append((type, props))
        return {"type": type}

    def update_theme(self, theme):
        self.themes.append(theme)

    def update_tokens(self, tokens):
        self.tokens.append(tokens)

    def get_framework(self):
        return "recording"


@pytest.fixture()
def recording_platform():
    adapters = AdapterRegistry()
    adapters.register("recording", RecordingAdapter)
    return Platform.with_defaults(framework="recording", adapters=adapters)


def test_create_decorates_props(recording_platform):
    recording_platform.create("button", {"text": "Go", "theme": "ignored"})
    type_, props = recording_platform.adapter.created[-1]
    assert type_ == "button"
    assert props["text"] == "Go"
    assert props["theme"]["name"] == "default"
    assert props["tokens"]["colors"]["primary"] == "#007bff"


def test_create_passes_unknown_types_through(recording_platform):
    assert recording_platform.create("hologram") == {"type": "hologram"}


def test_convenience_wrappers_are_fixed_type(recording_platform):
    p = recording_platform
    p.button({"text": "A"})
    p.search_bar(placeholder="Find")
    p.campaign_selector()
    created = p.adapter.created
    assert [t for t, _ in created] == ["button", "searchBar", "campaignSelector"]
    assert created[1][1]["placeholder"] == "Find"
    assert all("theme" in props and "tokens" in props for _, props in created)


def test_set_theme_pushes_to_adapter(recording_platform):
    recording_platform.set_theme("dark")
    assert recording_platform.adapter.themes[-1]["name"] == "dark"
    assert recording_platform.get_theme()["name"] == "dark"


def test_set_unknown_theme_pushes_default(recording_platform):
    recording_platform.set_theme("dark")
    recording_platform.set_theme("nonexistent")
    assert recording_platform.adapter.themes[-1]["name"] == "default"


def test_update_tokens_pushes_merged_tree(recording_platform):
    recording_platform.update_tokens({"colors": {"primary": "#ff0000"}})
    pushed = recording_platform.adapter.tokens[-1]
    assert pushed["colors"]["primary"] == "#ff0000"
    assert pushed["colors"]["secondary"] == "#6c757d"
    assert recording_platform.get_tokens()["colors"]["primary"] == "#ff0000"


def test_snapshots_reflect_token_updates(recording_platform):
    recording_platform.update_tokens({"colors": {"primary": "#ff0000"}})
    recording_platform.card()
    _, props = recording_platform.adapter.created[-1]
    assert props["tokens"]["colors"]["primary"] == "#ff0000"
    # themes are synthesized once and are not re-derived from later tokens
    assert props["theme"]["colors"]["primary"] == "#007bff"


def test_explicit_unknown_framework_raises():
    with pytest.raises(UnsupportedFrameworkError):
        create_platform(framework="svelte")


def test_auto_uses_detector_once():
    calls = []

    def detector():
        calls.append(1)
        return "vanilla"

    p = create_platform(detector=detector)
    p.set_theme("dark")
    p.button()
    assert calls == [1]
    assert p.get_framework() == "vanilla"


def test_auto_with_unregistered_detection_falls_back_to_vanilla():
    p = create_platform(detector=lambda: "svelte")
    assert p.get_framework() == "vanilla"


def test_vanilla_platform_builds_elements():
    p = create_vanilla_platform(theme="professional")
    el = p.button({"text": "Save"})
    assert isinstance(el, Element)
    assert el.attributes["data-text"] == "Save"
    assert p.get_theme()["colors"]["primary"] == "#2563eb"


def test_instances_are_isolated():
    a = create_vanilla_platform()
    b = create_vanilla_platform()
    a.update_tokens({"colors": {"primary": "#ff0000"}})
    a.set_theme("dark")
    assert b.get_tokens()["colors"]["primary"] == "#007bff"
    assert b.get_theme()["name"] == "default"
    assert a.bus is not b.bus


def test_surface_receives_initial_theme_and_updates():
    surface = InMemoryStyleSurface()
    p = create_vanilla_platform(surface=surface, theme="dark")
    assert surface.class_names() == ["tmyl-theme-dark"]
    assert surface.get_variable("--tmyl-color-background") == "#0d1117"
    p.update_tokens({"colors": {"primary": "#ff0000"}})
    assert surface.get_variable("--tmyl-colors-primary") == "#ff0000"
    p.close()
    p.set_theme("trading")
    assert surface.class_names() == ["tmyl-theme-dark"]


def test_config_tokens_seed_store_and_config_is_copied():
    p = create_vanilla_platform(tokens={"colors": {"primary": "#333333"}})
    assert p.get_tokens()["colors"]["primary"] == "#333333"
    cfg = p.get_config()
    assert isinstance(cfg, PlatformConfig)
    cfg.tokens["colors"]["primary"] = "#000000"
    assert p.get_config().tokens["colors"]["primary"] == "#333333"


def test_feature_overrides_from_mapping():
    p = create_vanilla_platform(features={"rtl": True})
    assert p.get_config().features.rtl is True
    assert p.get_config().features.animations is True
    assert p.button().attributes["dir"] == "rtl"


def test_debug_snapshot():
    svc = LoggingService(capacity=10)
    svc.attach()
    try:
        p = create_vanilla_platform(logging_service=svc)
        p.set_theme("missing-theme")
        info = p.debug()
    finally:
        svc.detach()
    assert info["framework"] == "vanilla"
    assert info["version"] == p.get_version() == "1.0.0"
    assert info["theme"]["name"] == "default"
    assert info["config"]["framework"] == "vanilla"
    assert any("missing-theme" in e["message"] for e in info["logs"])


def test_platform_accessors_expose_owned_components():
    p = create_vanilla_platform()
    p.themes.create_theme("brand", "dark", {"colors": {"primary": "#abcdef"}})
    p.set_theme("brand")
    assert p.get_theme()["colors"]["primary"] == "#abcdef"
    assert ".tmyl-theme-brand {" in p.themes.generate_all_themes_css()
    assert p.tokens.get_colors()["primary"] == "#007bff"


def test_custom_registry_override_for_vanilla():
    adapters = default_adapter_registry()
    adapters.register("vanilla", RecordingAdapter, allow_override=True)
    p = create_vanilla_platform(adapters=adapters)
    assert p.get_framework() == "recording"


def test_accessor_changes_reach_adapter(recording_platform):
    p = recording_platform
    record = p.themes.get_theme("default")
    record["colors"]["primary"] = "#010101"
    p.themes.register_theme("default", record)
    assert p.adapter.themes[-1]["colors"]["primary"] == "#010101"

    p.tokens.update_tokens({"colors": {"primary": "#ff0000"}})
    assert p.adapter.tokens[-1]["colors"]["primary"] == "#ff0000"
    assert p.adapter.tokens[-1]["colors"]["secondary"] == "#6c757d"


def test_fallback_without_pointer_move_pushes_nothing(recording_platform):
    recording_platform.set_theme("nonexistent")
    assert recording_platform.adapter.themes == []
