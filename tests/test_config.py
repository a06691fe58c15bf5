import pytest

from mysqltuner import config as app_config

ENV_NAMES = [
    "MYSQLTUNER_HOST",
    "MYSQLTUNER_PORT",
    "MYSQLTUNER_USER",
    "MYSQLTUNER_PASSWORD",
    "MYSQLTUNER_DATABASE",
    "MYSQLTUNER_CONNECT_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_missing_file_gives_empty_config(tmp_path):
    cfg = app_config.load_config(tmp_path)
    assert cfg == app_config.MySQLTunerConfig()


def test_reads_mysql_section(tmp_path):
    (tmp_path / "mysqltuner.toml").write_text(
        '[mysql]\nhost = "db.internal"\nport = 3307\nuser = "tuner"\n'
        'password = "pw"\nconnect_timeout = 4\n'
    )
    cfg = app_config.load_config(tmp_path)
    assert cfg.host == "db.internal"
    assert cfg.port == 3307
    assert cfg.user == "tuner"
    assert cfg.password == "pw"
    assert cfg.connection_timeout == 4


def test_environment_overrides_file(tmp_path, monkeypatch):
    (tmp_path / "mysqltuner.toml").write_text('[mysql]\nhost = "db.internal"\nport = 3307\n')
    monkeypatch.setenv("MYSQLTUNER_HOST", "10.0.0.5")
    monkeypatch.setenv("MYSQLTUNER_PORT", "3399")
    monkeypatch.setenv("MYSQLTUNER_PASSWORD", "")

    cfg = app_config.load_config(tmp_path)

    assert cfg.host == "10.0.0.5"
    assert cfg.port == 3399
    assert cfg.password == ""


def test_invalid_port_in_environment_is_ignored(tmp_path, monkeypatch):
    (tmp_path / "mysqltuner.toml").write_text("[mysql]\nport = 3307\n")
    monkeypatch.setenv("MYSQLTUNER_PORT", "not-a-port")

    cfg = app_config.load_config(tmp_path)

    assert cfg.port == 3307
