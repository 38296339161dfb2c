"""Settings access for Proxy Sheet."""

from proxysheet.config import settings as _settings_module
from proxysheet.config.settings import ProxySheetSettings, reload_settings


def get_settings() -> ProxySheetSettings:
    """Return the current settings instance (tracks reload_settings())."""
    return _settings_module.settings


__all__ = ["ProxySheetSettings", "get_settings", "reload_settings"]
