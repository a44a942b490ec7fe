"""Load ``BrussConfig`` from a TOML file, and the process-wide instance.

``load(path)`` has no global state: it reads the file, validates it and
returns a new ``BrussConfig`` or raises a ``ConfigError``.

``get_config()`` loads ``bruss.toml`` from the working directory on first use
and returns the same object for the rest of the process. A config that cannot
be loaded is fatal: ``get_config()`` raises ``SystemExit``. Call
``get_config.cache_clear()`` to drop the cached instance (tests only).
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Optional, Union

from bruss_config.domain import ConfigDecodeError, ConfigError, ConfigIOError

from .constants import CONFIG_PATH
from .schema import BrussConfig

logger = logging.getLogger(__name__)


def load(path: Union[str, os.PathLike]) -> BrussConfig:
    """Read and validate the config file at *path*.

    Raises:
        ConfigIOError: the file could not be read.
        ConfigDecodeError: the file is not UTF-8, not valid TOML, or does not
            match the schema.
    """
    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as exc:
        raise ConfigIOError(f"Cannot read config file {p}: {exc}", path=path, cause=exc) from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigDecodeError(f"Config file {p} is not valid UTF-8: {exc}", path=path, cause=exc) from exc
    cfg = BrussConfig.from_toml(text, path=path)
    logger.debug("Loaded config from %s", p)
    return cfg


_lock = threading.Lock()
_config: Optional[BrussConfig] = None


def get_config() -> BrussConfig:
    """Return the process-wide config, loading ``CONFIG_PATH`` on first call.

    Concurrent first callers block on a lock; exactly one of them reads the
    file and all of them get the same object.
    """
    global _config
    cfg = _config
    if cfg is not None:
        return cfg
    with _lock:
        if _config is None:
            try:
                _config = load(CONFIG_PATH)
            except ConfigError as exc:
                logger.critical("Cannot load static configs from %s: %s", CONFIG_PATH, exc)
                raise SystemExit(f"!!cannot load static configs: {exc}") from exc
        return _config


def _cache_clear() -> None:
    global _config
    with _lock:
        _config = None


get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
