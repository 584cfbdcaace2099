"""Design system package.

Token store, theme registry and the style emitter. The Qt surface lives in
`tamyla_ui.design.qt_surface` and is imported on demand (it pulls in PyQt6).
"""

from .merge import deep_merge  # noqa: F401
from .loader import load_default_tokens, TokenValidationError  # noqa: F401
from .token_store import TokenStore, TokenTree  # noqa: F401
from .theme_registry import (  # noqa: F401
    ThemeRegistry,
    ThemeRecord,
    ThemeNotFoundError,
    project_default_theme,
)
from .theme_presets import built_in_overlays  # noqa: F401
from .style_emitter import (  # noqa: F401
    StyleApplier,
    apply_theme,
    apply_tokens,
    flatten_tokens,
    render_root_css,
    render_theme_css,
    theme_declarations,
    token_declarations,
)
from .style_surface import StyleSurface, InMemoryStyleSurface  # noqa: F401
