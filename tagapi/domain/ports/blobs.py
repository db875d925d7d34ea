# tagapi/domain/ports/blobs.py
from __future__ import annotations

from typing import Protocol

from tagapi.domain.entities.blob import Blob


class BlobRepository(Protocol):
    def save(self, blob: Blob) -> Blob: ...
