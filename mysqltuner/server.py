"""A MySQL server descriptor owning at most one live connection."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

import mysql.connector

from . import connection as mysql_connection
from .connection import MySQLConnectionConfig

if TYPE_CHECKING:  # pragma: no cover
    from .config import MySQLTunerConfig

LOG = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3306


@dataclass
class OpenResult:
    ok: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(eq=False)
class MySQLServer:
    """Connection parameters and the live handle for one MySQL server.

    ``host`` and ``port`` are defaulted once, at construction: an empty host
    becomes ``localhost`` and a zero port becomes ``3306``. An explicit
    ``port=0`` therefore cannot be told apart from an omitted port.

    Connection failures never raise out of :meth:`open`. They are returned as
    an :class:`OpenResult` and recorded in ``last_error``, which is only ever
    overwritten by a later failure.
    """

    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    host: Optional[str] = None
    port: int = 0
    database: Optional[str] = None
    connection_timeout: Optional[int] = None
    last_error: str = field(default="", init=False)
    _connection: Optional[mysql.connector.MySQLConnection] = field(
        default=None, init=False, repr=False
    )
    _disposed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.host:
            self.host = DEFAULT_HOST
        if self.port == 0:
            self.port = DEFAULT_PORT

    @classmethod
    def from_config(cls, cfg: "MySQLTunerConfig") -> "MySQLServer":
        return cls(
            username=cfg.user,
            password=cfg.password,
            host=cfg.host,
            port=cfg.port or 0,
            database=cfg.database,
            connection_timeout=cfg.connection_timeout,
        )

    @property
    def connection(self) -> Optional[mysql.connector.MySQLConnection]:
        return self._connection

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def is_open(self) -> bool:
        conn = self._connection
        return conn is not None and bool(conn.is_connected())

    def connection_config(self) -> MySQLConnectionConfig:
        return MySQLConnectionConfig(
            host=self.host,
            port=self.port,
            user=self.username,
            password=self.password,
            database=self.database,
            connection_timeout=self.connection_timeout,
        )

    def open(self) -> OpenResult:
        """Open a connection to the server.

        Only client library errors (``mysql.connector.Error``) are caught;
        anything else propagates to the caller.
        """

        config = self.connection_config()
        LOG.debug("Opening MySQL connection (%s)", config.connection_string())

        if self._connection is not None:
            # The previous handle is not closed here; it is simply replaced.
            LOG.debug("Replacing existing connection handle for %s:%s", self.host, self.port)

        conn = mysql_connection.new_connection()
        self._connection = conn
        try:
            conn.connect(**config.connect_kwargs())
        except mysql.connector.Error as exc:
            self._release(conn)
            self._connection = None
            self.last_error = exc.msg or str(exc)
            LOG.warning(
                "Could not connect to MySQL at %s:%s: %s",
                self.host,
                self.port,
                self.last_error,
            )
            return OpenResult(ok=False, error=self.last_error)

        return OpenResult(ok=True)

    def close(self) -> None:
        if self._connection is None:
            return
        LOG.debug("Closing MySQL connection to %s:%s", self.host, self.port)
        self._connection.close()
        self._connection = None

    def dispose(self) -> None:
        self._dispose(disposing=True)

    def _dispose(self, disposing: bool) -> None:
        if self._disposed:
            return
        # The finalizer path must not touch other objects; the client
        # library's own finalizer closes its socket.
        if disposing and self._connection is not None:
            LOG.debug("Disposing MySQL connection to %s:%s", self.host, self.port)
            self._connection.close()
            self._connection = None
        self._disposed = True

    @staticmethod
    def _release(conn: mysql.connector.MySQLConnection) -> None:
        try:
            conn.close()
        except mysql.connector.Error as exc:
            LOG.debug("Ignoring error while releasing failed connection: %s", exc)

    def __enter__(self) -> "MySQLServer":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # dispose() is one-shot, so a reused descriptor still needs close().
        self.close()
        self.dispose()

    def __del__(self) -> None:
        # Attributes may be missing if __init__ failed part way.
        if "_disposed" in self.__dict__:
            self._dispose(disposing=False)
