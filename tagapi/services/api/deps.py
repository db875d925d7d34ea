# tagapi/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from tagapi.database.core.main import SessionLocal
from tagapi.database.core.transaction import transactional
from tagapi.database.repos.tag_repo import SqlAlchemyTagRepo
from tagapi.services.tags.service import TagService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction: COMMIT on normal exit,
    ROLLBACK if an exception bubbles out.
    """
    with transactional(db):
        yield db


def get_tag_service(db: Session = Depends(transactional_session)) -> TagService:
    return TagService(SqlAlchemyTagRepo(db))
