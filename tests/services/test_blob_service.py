# tests/services/test_blob_service.py
from unittest.mock import Mock

from sqlalchemy import func, select

from tagapi.database.models.blob import Blob as DBBlob
from tagapi.database.repos.blob_repo import SqlAlchemyBlobRepo
from tagapi.domain.entities.blob import Blob
from tagapi.services.blobs.service import BlobService


def test_create_blob_delegates_single_save():
    repo = Mock()
    blob = Blob(data=b"payload")

    assert BlobService(repo).create_blob(blob) is None
    repo.save.assert_called_once_with(blob)


def test_create_blob_writes_one_row(db_session):
    BlobService(SqlAlchemyBlobRepo(db_session)).create_blob(Blob(data=b"abc", name="a.txt", content_type="text/plain"))

    count = db_session.execute(select(func.count()).select_from(DBBlob)).scalar_one()
    assert count == 1
