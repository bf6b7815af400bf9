"""Connection settings and connection setup for the MySQL store."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

import pymysql


class DatabaseError(RuntimeError):
    """Raised when the database cannot be reached."""


@dataclass(frozen=True)
class DatabaseConfig:
    """Where and as whom to connect."""

    user: str
    password: str
    host: str
    port: str
    name: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DatabaseConfig":
        """Read DB_USER, DB_PASSWORD, DB_HOST, DB_PORT and DB_NAME."""
        env = os.environ if environ is None else environ
        return cls(
            user=env.get("DB_USER", ""),
            password=env.get("DB_PASSWORD", ""),
            host=env.get("DB_HOST", ""),
            port=env.get("DB_PORT", ""),
            name=env.get("DB_NAME", ""),
        )

    def dsn(self) -> str:
        """The data source name in user:password@tcp(host:port)/db form."""
        return f"{self.user}:{self.password}@tcp({self.host}:{self.port})/{self.name}?parseTime=true"


def init_database(config: DatabaseConfig | None = None) -> pymysql.connections.Connection:
    """Open and verify a connection; raise DatabaseError on failure."""
    config = config or DatabaseConfig.from_env()
    try:
        port = int(config.port)
    except ValueError as exc:
        raise DatabaseError(f"invalid database port {config.port!r}") from exc
    try:
        return pymysql.connect(
            host=config.host,
            port=port,
            user=config.user,
            password=config.password,
            database=config.name or None,
            charset="utf8mb4",
            autocommit=True,
        )
    except pymysql.MySQLError as exc:
        raise DatabaseError(str(exc)) from exc