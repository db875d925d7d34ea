# tagapi/services/blobs/service.py
from __future__ import annotations

from tagapi.domain.entities.blob import Blob
from tagapi.domain.ports.blobs import BlobRepository


class BlobService:
    def __init__(self, repo: BlobRepository):
        self.repo = repo

    def create_blob(self, blob: Blob) -> None:
        self.repo.save(blob)
