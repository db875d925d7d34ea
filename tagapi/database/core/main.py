# tagapi/database/core/main.py
from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import MetaData, create_engine, event, Column, Table
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from tagapi.common.settings import get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated", "data_origin", "meta_data")


class Base(DeclarativeBase):
    # Schema is None on SQLite or when the app lives in 'public'
    metadata = MetaData(
        schema=_settings.db_schema,
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return super().__table_cls__(*args, **kw)

        # Positional args are (name, metadata, *columns_and_constraints)
        name, metadata, *rest = args

        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}

        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def engine_options(url: str) -> Dict[str, Any]:
    """
    Pool options only make sense for server databases; SQLite gets none
    (and a shared connection for in-memory URLs).
    """
    if url.startswith("sqlite"):
        opts: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if make_url(url).database in (None, "", ":memory:"):
            opts["poolclass"] = StaticPool
        return opts
    return {
        "pool_size": _settings.db.pool_size,
        "max_overflow": _settings.db.max_overflow,
        "pool_pre_ping": _settings.db.pool_pre_ping,
        "pool_recycle": _settings.db.pool_recycle,
    }


def build_engine(url: str) -> Engine:
    eng = create_engine(url, echo=_settings.db.echo, future=True, **engine_options(url))

    # Ensure the app schema is first, then public (so extensions remain visible)
    schema = _settings.db_schema
    if schema and eng.dialect.name == "postgresql":
        @event.listens_for(eng, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    # SQLite LIKE folds ASCII case by default; match Postgres semantics
    if eng.dialect.name == "sqlite":
        @event.listens_for(eng, "connect")
        def _case_sensitive_like(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA case_sensitive_like = ON")
            cur.close()

    return eng


engine = build_engine(_settings.database_url)

SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)

