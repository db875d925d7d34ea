# tagapi/domain/entities/tag.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

TAG_NAME_MAX_LENGTH = 255

# ids are BIGINT columns
TAG_ID_MIN = -(2**63)
TAG_ID_MAX = 2**63 - 1


@dataclass
class Tag:
    """
    A label identified by a system-assigned integer id.
    The id is None until the tag has been persisted.
    """
    id: Optional[int] = None
    name: str = ""  # required (non-empty)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("name is required")
        if len(self.name) > TAG_NAME_MAX_LENGTH:
            raise ValueError(f"name must be at most {TAG_NAME_MAX_LENGTH} characters")
        if self.id is not None and self.id < 1:
            raise ValueError("id must be >= 1")
