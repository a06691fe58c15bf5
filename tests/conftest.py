from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from mysqltuner import connection as mysql_connection


class FakeConnection:
    """Stand-in for an unopened ``mysql.connector.MySQLConnection``."""

    def __init__(self, error: Optional[BaseException] = None) -> None:
        self._error = error
        self.connect_kwargs: Optional[Dict[str, Any]] = None
        self.connected = False
        self.close_calls = 0

    def connect(self, **kwargs: Any) -> None:
        self.connect_kwargs = kwargs
        if self._error is not None:
            raise self._error
        self.connected = True

    def is_connected(self) -> bool:
        return self.connected

    def get_server_info(self) -> str:
        return "8.0.36"

    def close(self) -> None:
        self.close_calls += 1
        self.connected = False


class FakeConnector:
    """Replaces the connection factory; queued errors fail the next opens."""

    def __init__(self) -> None:
        self.created: List[FakeConnection] = []
        self.errors: List[BaseException] = []

    def __call__(self) -> FakeConnection:
        conn = FakeConnection(self.errors.pop(0) if self.errors else None)
        self.created.append(conn)
        return conn


@pytest.fixture
def connector(monkeypatch: pytest.MonkeyPatch) -> FakeConnector:
    fake = FakeConnector()
    monkeypatch.setattr(mysql_connection, "new_connection", fake)
    return fake
