# tagapi/domain/entities/blob.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Blob:
    id: Optional[int] = None
    data: bytes = b""
    name: Optional[str] = None
    content_type: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise ValueError("data must be bytes")
        self.data = bytes(self.data)

    @property
    def size(self) -> int:
        return len(self.data)
