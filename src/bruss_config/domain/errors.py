"""Configuration load errors."""

from __future__ import annotations

import os
from typing import Optional, Union


class ConfigError(Exception):
    """Base for configuration load errors.

    ``path`` is the file that was being loaded (``None`` when parsing text that
    did not come from a file); ``cause`` is the lower-level exception, also
    available as ``__cause__`` since loaders raise with ``from``.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Union[str, os.PathLike]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class ConfigIOError(ConfigError):
    """The config file could not be read (missing, unreadable, not a file)."""
    pass


class ConfigDecodeError(ConfigError):
    """The config file was read but is not valid TOML or does not match the schema."""
    pass
