"""Enumerations shared with the routing pipeline.

Both are used as set elements in ``RoutingConfig`` filters; the values are the
lowercase strings written in ``bruss.toml``.
"""

from __future__ import annotations

from enum import Enum


class RoutingType(str, Enum):
    """Kind of feed the routing job builds routes for."""

    URBAN = "urban"
    EXTRAURBAN = "extraurban"
    RAIL = "rail"


class AreaType(str, Enum):
    """Service area classification of a stop or route."""

    URBAN = "urban"
    EXTRAURBAN = "extraurban"
