"""Domain layer: enumerations and errors. No I/O."""

from .models import AreaType, RoutingType
from .errors import ConfigDecodeError, ConfigError, ConfigIOError

__all__ = [
    "AreaType",
    "RoutingType",
    "ConfigError",
    "ConfigIOError",
    "ConfigDecodeError",
]
