from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import psycopg
from pydantic import SecretStr

from personalink_core.errors import StorageUnavailable


@dataclass(frozen=True)
class PostgresConfig:
    dsn: str | None = None
    host: str | None = None
    port: int = 5432
    db: str | None = None
    user: str | None = None
    password: SecretStr | str | None = None

    def build_dsn(self) -> str:
        if self.dsn:
            return self.dsn
        required = {
            "POSTGRES_HOST": self.host,
            "POSTGRES_DB": self.db,
            "POSTGRES_USER": self.user,
            "POSTGRES_PASSWORD": self.password,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ValueError(f"Missing Postgres config: {', '.join(missing)} (or set PG_DSN)")
        password = (
            self.password.get_secret_value()
            if isinstance(self.password, SecretStr)
            else self.password
        )
        return f"postgresql://{self.user}:{password}@{self.host}:{self.port}/{self.db}"


@contextmanager
def connect(dsn: str, *, schema: str = "public") -> Iterator[psycopg.Connection]:
    """
    Opens a connection pinned to `schema` with UTC timestamps.

    Connection failures surface as `StorageUnavailable`.
    """
    options = f"-c search_path={schema} -c timezone=UTC"
    try:
        conn = psycopg.connect(dsn, options=options, application_name="personalink")
    except psycopg.OperationalError as e:
        raise StorageUnavailable(f"Could not connect to Postgres: {e}") from e
    with conn:
        yield conn
