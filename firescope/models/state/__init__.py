"""Settings models."""

from firescope.models.state.browse_settings import (
    BrowseSettings,
    ConfigError,
    ConfigLoadError,
    load_browse_settings,
)

__all__ = [
    "BrowseSettings",
    "ConfigError",
    "ConfigLoadError",
    "load_browse_settings",
]
