"""MongoDB connection option values.

These mirror the shape the driver expects (a list of TCP server addresses plus
a credential) without importing the driver: building options never opens a
connection. ``ConnectionOptions.client_kwargs()`` renders them as keyword
arguments for ``pymongo.MongoClient``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ServerAddress:
    """A single TCP host/port pair. ``port=None`` leaves the driver default (27017)."""

    host: str
    port: Optional[int] = None

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class Credential:
    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class ConnectionOptions:
    """Options for connecting to a MongoDB deployment."""

    hosts: Tuple[ServerAddress, ...]
    credential: Optional[Credential] = None

    def client_kwargs(self) -> Dict[str, Any]:
        """Return keyword arguments for ``pymongo.MongoClient(**kwargs)``.

        A single host is passed as ``host``/``port``; several hosts are passed
        as a list of ``host:port`` seeds.
        """
        kwargs: Dict[str, Any] = {}
        if len(self.hosts) == 1:
            address = self.hosts[0]
            kwargs["host"] = address.host
            if address.port is not None:
                kwargs["port"] = address.port
        else:
            kwargs["host"] = [str(a) for a in self.hosts]
        if self.credential is not None:
            kwargs["username"] = self.credential.username
            kwargs["password"] = self.credential.password
        return kwargs
