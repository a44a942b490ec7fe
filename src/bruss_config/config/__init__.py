"""Configuration: schema, loading from ``bruss.toml``, and shared constants."""

from .schema import ApiConfig, BrussConfig, DBConfig, RoutingConfig, TTConfig
from .loader import get_config, load
from .constants import API_DEFAULT_LIMIT, API_MAX_REALTIME_AGE, CONFIG_PATH

__all__ = [
    "ApiConfig", "BrussConfig", "DBConfig", "RoutingConfig", "TTConfig",
    "get_config", "load",
    "API_DEFAULT_LIMIT", "API_MAX_REALTIME_AGE", "CONFIG_PATH",
]
