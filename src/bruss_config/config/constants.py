"""Named constants for the config file location and schema defaults."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# File location
# ---------------------------------------------------------------------------

# Path read by get_config(), relative to the process working directory.
# Services are started from the deployment directory that holds bruss.toml.
CONFIG_PATH: str = "bruss.toml"

# ---------------------------------------------------------------------------
# Routing defaults
# ---------------------------------------------------------------------------

# A failed download or parse aborts the routing job unless explicitly disabled.
ROUTING_EXIT_ON_ERR: bool = True
ROUTING_DEEP_TRIP_CHECK: bool = False
ROUTING_DRY_RUN: bool = False

# ---------------------------------------------------------------------------
# API defaults
# ---------------------------------------------------------------------------

# Page size when a request has no explicit limit.
API_DEFAULT_LIMIT: int = 20

# Maximum age of realtime data served by the API.
API_MAX_REALTIME_AGE: int = 0

# ---------------------------------------------------------------------------
# Integer bounds
# ---------------------------------------------------------------------------

U16_MAX: int = 2**16 - 1
U64_MAX: int = 2**64 - 1
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1
