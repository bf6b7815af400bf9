from unittest import mock

import pymysql
import pytest

from shopapi.database import DatabaseConfig, DatabaseError, init_database


def _config(port="3306"):
    password = "password"
    return DatabaseConfig(user="user", password=password, host="localhost", port=port, name="shop")


def test_from_env_reads_variables():
    environ = {
        "DB_USER": "user",
        "DB_PASSWORD": "password",
        "DB_HOST": "localhost",
        "DB_PORT": "3306",
        "DB_NAME": "shop",
    }
    assert DatabaseConfig.from_env(environ) == _config()


def test_from_env_missing_values_are_empty():
    config = DatabaseConfig.from_env({})
    assert (config.user, config.host, config.port, config.name) == ("", "", "", "")


def test_from_env_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.example.com")
    monkeypatch.setenv("DB_NAME", "catalogue")
    config = DatabaseConfig.from_env()
    assert config.host == "db.example.com"
    assert config.name == "catalogue"


def test_dsn_format():
    assert _config().dsn() == "user:password@tcp(localhost:3306)/shop?parseTime=true"


def test_init_database_connects_with_config():
    password = "password"
    sentinel = object()
    with mock.patch("pymysql.connect", return_value=sentinel) as connect:
        result = init_database(_config())
    assert result is sentinel
    connect.assert_called_once_with(
        host="localhost",
        port=3306,
        user="user",
        password=password,
        database="shop",
        charset="utf8mb4",
        autocommit=True,
    )


def test_init_database_rejects_bad_port():
    with mock.patch("pymysql.connect") as connect:
        with pytest.raises(DatabaseError):
            init_database(_config(port=""))
    assert connect.call_count == 0


def test_init_database_wraps_driver_errors():
    error = pymysql.err.OperationalError(2003, "cannot connect")
    with mock.patch("pymysql.connect", side_effect=error):
        with pytest.raises(DatabaseError) as info:
            init_database(_config())
    assert info.value.__cause__ is error