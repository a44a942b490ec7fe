"""Pytest fixtures and helpers for bruss-config tests."""
from __future__ import annotations

from pathlib import Path

import pytest

# Repo root (parent of tests/)
REPO_ROOT = Path(__file__).resolve().parent.parent

# Every required key, with no optional or defaulted key set.
MINIMAL_TOML = """\
[db]
host = "db1"
db = "bruss"
user = "a"
password = "b"

[tt]
secret = "s"
base_url = "http://x"

[routing]
host = "r"
url_bus = "u1"
url_rail = "u2"
get_trips = true
"""

# Every key set to a non-default value.
FULL_TOML = """\
[db]
host = "mongo.internal"
db = "bruss_prod"
user = "bruss"
password = "hunter2"
port = 27018

[tt]
secret = "c2VjcmV0"
base_url = "https://app-tpl.tndigit.it/gtlservice/"

[routing]
host = "0.0.0.0"
port = 8001
url_bus = "https://example.org/google_transit_urbano_tte.zip"
url_rail = "https://example.org/google_transit_extraurbano_tte.zip"
exit_on_err = false
get_trips = false
skip_routing_types = ["rail", "extraurban"]
deep_trip_check = true
parallel_downloads = 8
dry_run = true
filter_area = [21, 23]
filter_area_type = ["urban"]
filter_code = ["5", "5/"]
max_trip_requests = 1000

[api]
cors_allowed_origin = "https://bruss.example.org"
cors_allowed_methods = ["GET", "OPTIONS"]
cors_allowed_headers = ["Content-Type"]
cors_allow_credentials = true
default_limit = 50
max_realtime_age = 300
"""


@pytest.fixture
def write_config(tmp_path):
    """Write TOML text to ``tmp_path/bruss.toml`` and return the path."""
    def _write(text: str, name: str = "bruss.toml") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture(autouse=True)
def _reset_config_cache():
    """Drop the process-wide config before (and after) every test.

    Tests that call get_config() chdir into a tmp dir holding bruss.toml; the
    cached instance from a previous test must not leak into them.
    """
    from bruss_config.config import loader as config_loader
    config_loader.get_config.cache_clear()
    yield
    config_loader.get_config.cache_clear()


@pytest.fixture
def minimal_toml() -> str:
    return MINIMAL_TOML


@pytest.fixture
def full_toml() -> str:
    return FULL_TOML
