# tests/conftest.py
from __future__ import annotations
import os

import pytest
from sqlalchemy import text
from sqlalchemy.engine import Engine

from tagapi.common.settings import get_settings

# Must run before tagapi.database is imported: the engine and Base.metadata.schema
# are built from settings once.
if not get_settings().use_testcontainers:
    os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")
get_settings.cache_clear()

from tagapi.database.core.main import build_engine  # noqa: E402
from tagapi.database.models import Base  # noqa: E402  <-- imports your models/metadata


@pytest.fixture(scope="session")
def _database_url():
    cfg = get_settings()
    if not cfg.use_testcontainers:
        yield cfg.database_url
        return
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(cfg.test_db_image) as pg:
        # Force psycopg (v3) driver in the URL returned by testcontainers
        url = pg.get_connection_url().replace("psycopg2", "psycopg")
        yield url


def _prepare_schema(engine: Engine) -> None:
    schema = get_settings().db_schema
    if engine.dialect.name != "postgresql" or not schema:
        return
    with engine.begin() as conn:
        conn.execute(text(f'create schema if not exists "{schema}"'))


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    engine = build_engine(_database_url)
    _prepare_schema(engine)

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
