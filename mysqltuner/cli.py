import argparse
import logging
import sys
from typing import Optional

from . import __version__
from . import reporting
from . import config as app_config
from .server import MySQLServer


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", required=False, help="MySQL host")
    parser.add_argument("--port", type=int, required=False, help="MySQL port")
    parser.add_argument("--user", required=False, help="MySQL user")
    parser.add_argument("--password", required=False, help="MySQL password")
    parser.add_argument("--database", required=False, help="MySQL database name")
    parser.add_argument(
        "--connect-timeout",
        dest="connect_timeout",
        type=int,
        required=False,
        help="Seconds to wait for the server before giving up",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mysqltuner",
        description="mysqltuner - MySQL server connection checks",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"mysqltuner {__version__}",
        help="Show mysqltuner version and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # connect
    connect_p = subparsers.add_parser(
        "connect",
        help="Open a connection to a MySQL server and report the outcome",
    )
    _add_connection_arguments(connect_p)
    connect_p.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format for the connection report (default: table)",
    )

    return parser


def build_server(args: argparse.Namespace, cfg: app_config.MySQLTunerConfig) -> MySQLServer:
    return MySQLServer(
        username=args.user or cfg.user,
        password=args.password if args.password is not None else cfg.password,
        host=args.host or cfg.host,
        port=args.port or cfg.port or 0,
        database=args.database or cfg.database,
        connection_timeout=args.connect_timeout or cfg.connection_timeout,
    )


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "connect":
        cfg = app_config.load_config()
        server = build_server(args, cfg)
        try:
            result = server.open()
            reporting.output_connection_report(server, result, fmt=args.format)
        finally:
            server.dispose()
        return 0 if result.ok else 1

    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
