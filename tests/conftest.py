from __future__ import annotations

import os
import uuid
from collections.abc import Generator
from datetime import UTC, datetime

import psycopg
import pytest

from personalink_core.db import connect
from personalink_core.migrations.runner import apply_migrations
from personalink_core.models import RawSuggestion


@pytest.fixture(scope="session")
def pg_dsn() -> str:
    dsn = os.environ.get("PG_DSN")
    if not dsn:
        pytest.skip("PG_DSN not set; skipping DB integration tests")
    return dsn


@pytest.fixture(scope="session")
def pg_schema(pg_dsn: str) -> Generator[str, None, None]:
    schema = f"test_{uuid.uuid4().hex[:10]}"
    apply_migrations(pg_dsn, schema=schema)
    yield schema
    with psycopg.connect(pg_dsn) as conn:
        conn.execute(f'drop schema if exists "{schema}" cascade')
        conn.commit()


@pytest.fixture()
def conn(pg_dsn: str, pg_schema: str) -> Generator[psycopg.Connection, None, None]:
    with connect(pg_dsn, schema=pg_schema) as c:
        c.execute("truncate useful_links")
        c.commit()
        yield c


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def suggestion(url: str, title: str = "Some link", **kwargs) -> RawSuggestion:  # noqa: ANN003
    kwargs.setdefault("category", "website")
    kwargs.setdefault("icon_keywords", "website tool")
    return RawSuggestion(title=title, url=url, **kwargs)
