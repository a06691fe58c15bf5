from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import mysql.connector


@dataclass
class MySQLConnectionConfig:
    host: str = "localhost"
    port: int = 3306
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    connection_timeout: Optional[int] = None

    def connect_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``MySQLConnection.connect``.

        Optional settings left as ``None`` are omitted so the client library
        applies its own defaults.
        """

        kwargs: Dict[str, Any] = {
            "host": self.host,
            "port": self.port,
        }
        if self.user is not None:
            kwargs["user"] = self.user
        if self.password is not None:
            kwargs["password"] = self.password
        if self.database:
            kwargs["database"] = self.database
        if self.connection_timeout is not None:
            kwargs["connection_timeout"] = self.connection_timeout
        return kwargs

    def connection_string(self, mask_password: bool = True) -> str:
        parts = [
            f"server={self.host}",
            f"port={self.port}",
            f"user id={self.user or ''}",
        ]
        if self.password:
            parts.append("password=" + ("****" if mask_password else self.password))
        if self.database:
            parts.append(f"database={self.database}")
        return ";".join(parts)


def new_connection() -> mysql.connector.MySQLConnection:
    """Create an unopened MySQL connection object.

    The caller opens it with ``connect(**config.connect_kwargs())`` and is
    responsible for closing it.
    """

    return mysql.connector.MySQLConnection()
