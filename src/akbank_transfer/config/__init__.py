"""Configuration package."""

from .settings import AkbankSettings, clear_settings_cache, get_settings
from .transport_options import TransportOptions

__all__ = [
    "AkbankSettings",
    "TransportOptions",
    "clear_settings_cache",
    "get_settings",
]
