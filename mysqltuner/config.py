from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

LOG = logging.getLogger(__name__)

CONFIG_FILENAME = "mysqltuner.toml"
ENV_PREFIX = "MYSQLTUNER_"


@dataclass
class MySQLTunerConfig:
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None
    connection_timeout: Optional[int] = None


def _load_toml_file(path: Path) -> dict:
    if not path.is_file():
        return {}
    with path.open("rb") as f:
        return tomllib.load(f)


def _int_from_env(name: str) -> Optional[int]:
    value = os.getenv(ENV_PREFIX + name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        LOG.warning("Ignoring non-integer %s%s=%r", ENV_PREFIX, name, value)
        return None


def load_config(directory: Optional[Path] = None) -> MySQLTunerConfig:
    """Load connection settings from mysqltuner.toml and environment.

    Precedence (lowest to highest):
      1. mysqltuner.toml in ``directory`` (the current working directory by default)
      2. Environment variables (MYSQLTUNER_*)
    Command-line flags still take ultimate precedence in the CLI.
    """

    cfg = MySQLTunerConfig()

    # 1) File-based config
    path = (directory or Path.cwd()) / CONFIG_FILENAME
    data = _load_toml_file(path)

    mysql_section = data.get("mysql", {})
    if isinstance(mysql_section, dict):
        cfg.host = mysql_section.get("host") or cfg.host
        port = mysql_section.get("port")
        if isinstance(port, int):
            cfg.port = port
        cfg.user = mysql_section.get("user") or cfg.user
        cfg.password = mysql_section.get("password") or cfg.password
        cfg.database = mysql_section.get("database") or cfg.database
        timeout = mysql_section.get("connect_timeout")
        if isinstance(timeout, int):
            cfg.connection_timeout = timeout
    else:
        LOG.warning("Ignoring [mysql] in %s: expected a table", path)

    # 2) Environment variables override file
    host = os.getenv(ENV_PREFIX + "HOST")
    if host:
        cfg.host = host

    port_env = _int_from_env("PORT")
    if port_env is not None:
        cfg.port = port_env

    user = os.getenv(ENV_PREFIX + "USER")
    if user:
        cfg.user = user

    password = os.getenv(ENV_PREFIX + "PASSWORD")
    if password is not None:
        cfg.password = password

    database = os.getenv(ENV_PREFIX + "DATABASE")
    if database:
        cfg.database = database

    timeout_env = _int_from_env("CONNECT_TIMEOUT")
    if timeout_env is not None:
        cfg.connection_timeout = timeout_env

    return cfg
