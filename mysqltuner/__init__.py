"""mysqltuner core package.

This package exposes the MySQL server descriptor used by the tuning tool to
open, hold and release its connection. The command-line entrypoint lives in
`mysqltuner.cli`.
"""

from .server import MySQLServer, OpenResult

__all__ = [
    "__version__",
    "MySQLServer",
    "OpenResult",
]

__version__ = "0.1.0"
