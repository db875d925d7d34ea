# tagapi/database/repos/blob_repo.py
from __future__ import annotations

from sqlalchemy.orm import Session

from tagapi.database.models.blob import Blob as DBBlob
from tagapi.database.repos._mapping import to_domain_blob
from tagapi.domain.entities.blob import Blob


class SqlAlchemyBlobRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def save(self, blob: Blob) -> Blob:
        row = DBBlob(data=blob.data, name=blob.name, content_type=blob.content_type)
        self.db.add(row)
        self.db.flush()
        return to_domain_blob(row)
