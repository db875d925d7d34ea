# tagapi/domain/ports/tags.py
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from tagapi.domain.dataclasses.page import Page
from tagapi.domain.entities.tag import Tag


class TagRepository(Protocol):
    def save_all(self, tags: Sequence[Tag]) -> List[Tag]: ...
    def find_by_id(self, tag_id: int) -> Optional[Tag]: ...
    def find_by_name_containing(self, fragment: str) -> List[Tag]: ...
    def find_by_name_exact(self, name: str) -> Optional[Tag]: ...
    def find_all_paged(self, page: int, size: int) -> Page[Tag]: ...
    def update_by_id(self, tag: Tag) -> Optional[Tag]: ...
    def delete_by_id(self, tag_id: int) -> bool: ...
