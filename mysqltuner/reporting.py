from __future__ import annotations

import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .server import MySQLServer, OpenResult


_console = Console()


def _server_version(server: MySQLServer) -> Optional[str]:
    if not server.is_open:
        return None
    return server.connection.get_server_info()


def connection_report(server: MySQLServer, result: OpenResult) -> Dict[str, Any]:
    return {
        "host": server.host,
        "port": server.port,
        "user": server.username,
        "connected": result.ok,
        "server_version": _server_version(server),
        "connection_string": server.connection_config().connection_string(),
        "last_error": server.last_error or None,
    }


def output_connection_report(
    server: MySQLServer, result: OpenResult, fmt: str = "table"
) -> None:
    report = connection_report(server, result)

    if fmt == "json":
        print(json.dumps(report, indent=2))
        return

    table = Table(title="MySQL Server")
    table.add_column("Setting")
    table.add_column("Value")

    table.add_row("Host", escape(str(report["host"])))
    table.add_row("Port", str(report["port"]))
    table.add_row("User", escape(report["user"] or "-"))
    table.add_row(
        "Status",
        "[green]connected[/green]" if report["connected"] else "[red]not connected[/red]",
    )
    table.add_row("Server version", escape(report["server_version"] or "-"))

    _console.print(table)
    if report["last_error"]:
        _console.print(f"[bold]Last error:[/bold] {escape(report['last_error'])}")
