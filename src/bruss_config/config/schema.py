"""Configuration schema for ``bruss.toml``. Field names are the TOML keys.

Every model is frozen and ignores unknown keys, so a config file written for a
newer release still loads. Scalars are strict: a TOML string is never coerced
into a number or a bool. Set-valued fields deduplicate into ``frozenset``.
"""

from __future__ import annotations

import os
import tomllib
from typing import Annotated, FrozenSet, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError

from bruss_config.domain import AreaType, ConfigDecodeError, RoutingType
from bruss_config.infrastructure import ConnectionOptions, Credential, ServerAddress, TTClient

from .constants import (
    API_DEFAULT_LIMIT,
    API_MAX_REALTIME_AGE,
    I64_MAX,
    I64_MIN,
    ROUTING_DEEP_TRIP_CHECK,
    ROUTING_DRY_RUN,
    ROUTING_EXIT_ON_ERR,
    U16_MAX,
    U64_MAX,
)

Port = Annotated[StrictInt, Field(ge=0, le=U16_MAX)]
Count = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class DBConfig(_Section):
    """MongoDB connection settings (``[db]``)."""

    host: StrictStr
    db: StrictStr = Field(..., description="Logical database name.")
    user: StrictStr
    password: StrictStr = Field(..., repr=False)
    port: Optional[Port] = Field(None, description="TCP port; driver default (27017) when unset.")

    def connection_options(self) -> ConnectionOptions:
        """Build driver options for this host and credential. Never connects."""
        return ConnectionOptions(
            hosts=(ServerAddress(host=self.host, port=self.port),),
            credential=Credential(username=self.user, password=self.password),
        )

    def database_name(self) -> str:
        return self.db


class TTConfig(_Section):
    """Transit-data API credentials (``[tt]``)."""

    secret: StrictStr = Field(..., repr=False)
    base_url: StrictStr

    def client(self) -> TTClient:
        """Return a new ``TTClient`` for this endpoint. No pooling; no I/O."""
        return TTClient(self.base_url, self.secret)


class RoutingConfig(_Section):
    """Settings for the routing/ingestion job (``[routing]``).

    Filters are independent of each other; combining them is up to the job.
    """

    host: StrictStr
    port: Optional[Port] = None
    url_bus: StrictStr = Field(..., description="Bus GTFS feed URL.")
    url_rail: StrictStr = Field(..., description="Rail GTFS feed URL.")
    exit_on_err: StrictBool = ROUTING_EXIT_ON_ERR
    get_trips: StrictBool = Field(..., description="Fetch trips from the tt API after routing.")
    skip_routing_types: FrozenSet[RoutingType] = Field(default_factory=frozenset)
    deep_trip_check: StrictBool = ROUTING_DEEP_TRIP_CHECK
    parallel_downloads: Optional[Count] = None
    dry_run: StrictBool = ROUTING_DRY_RUN
    filter_area: Optional[FrozenSet[Port]] = None
    filter_area_type: Optional[FrozenSet[AreaType]] = None
    filter_code: Optional[FrozenSet[StrictStr]] = None
    max_trip_requests: Optional[Count] = None


class ApiConfig(_Section):
    """HTTP API settings (``[api]``). CORS fields are independent and all optional."""

    cors_allowed_origin: Optional[StrictStr] = None
    cors_allowed_methods: Optional[Tuple[StrictStr, ...]] = None
    cors_allowed_headers: Optional[Tuple[StrictStr, ...]] = None
    cors_allow_credentials: Optional[StrictBool] = None
    default_limit: Annotated[StrictInt, Field(ge=I64_MIN, le=I64_MAX)] = API_DEFAULT_LIMIT
    max_realtime_age: Count = API_MAX_REALTIME_AGE


class BrussConfig(_Section):
    """Root of ``bruss.toml``.

    ``db``, ``tt`` and ``routing`` are required tables; a missing ``[api]``
    table is the same as an empty one.
    """

    db: DBConfig
    tt: TTConfig
    routing: RoutingConfig
    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def from_toml(
        cls, text: str, path: Optional[Union[str, os.PathLike]] = None
    ) -> "BrussConfig":
        """Parse and validate TOML *text*.

        Raises:
            ConfigDecodeError: malformed TOML or content that does not match
                the schema. *path* is only used in the error.
        """
        where = f" in {os.fspath(path)}" if path is not None else ""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigDecodeError(f"Invalid TOML{where}: {exc}", path=path, cause=exc) from exc
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigDecodeError(
                f"Invalid configuration{where}:\n{_describe(exc)}", path=path, cause=exc
            ) from exc

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "BrussConfig":
        """Same as ``bruss_config.config.load(path)``."""
        from .loader import load

        return load(path)


def _describe(exc: ValidationError) -> str:
    """One ``  - location: message`` line per validation error."""
    lines = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        lines.append(f"  - {loc}: {err['msg']}")
    return "\n".join(lines)
