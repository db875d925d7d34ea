# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy import delete
from sqlalchemy.orm import Session, sessionmaker
from starlette.testclient import TestClient

from tagapi.services.api.app import create_app
from tagapi.database.models import Tag as DBTag
from tagapi.services.api.deps import get_db, transactional_session


@pytest.fixture()
def db_session(db_engine):
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        conn.close()


@pytest.fixture()
def api_client(db_session):
    """
    A TestClient whose FastAPI dependency `transactional_session` is overridden
    to yield a single SQLAlchemy Session bound to the test transaction.
    All API calls in one test share the same session (so POST -> GET works),
    and everything is rolled back at the end of the test.
    """
    app = create_app()

    def _override():
        # yield the same session for every request in this test
        yield db_session

    app.dependency_overrides[transactional_session] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def committing_client(db_engine):
    """
    A TestClient that runs the real `transactional_session` dependency, so each
    request COMMITs or ROLLBACKs on its own. Only `get_db` is swapped for
    sessions on the test engine; committed rows are wiped afterwards.
    """
    TestSession = sessionmaker(bind=db_engine, expire_on_commit=False, future=True, autoflush=False)
    app = create_app()

    def _override():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
        with db_engine.begin() as conn:
            conn.execute(delete(DBTag))
