# tagapi/services/tags/service.py
from __future__ import annotations

from typing import List, Sequence

from tagapi.domain.dataclasses.page import Page
from tagapi.domain.entities.tag import Tag
from tagapi.domain.errors import NotFoundError
from tagapi.domain.ports.tags import TagRepository
from tagapi.services.mappers.tag import to_domain_from_create, to_domain_from_replace, to_dto
from tagapi.services.schemas.tags import TagDTO


class TagService:
    """
    Thin delegation layer over a TagRepository.
    Each method is one repository call plus DTO translation; payloads are
    expected to be validated already.
    """

    def __init__(self, repo: TagRepository):
        self.repo = repo

    def save_tags(self, tags: Sequence[TagDTO]) -> List[TagDTO]:
        saved = self.repo.save_all([to_domain_from_create(t) for t in tags])
        return [to_dto(t) for t in saved]

    def retrieve_all_tags(self, page_number: int, page_size: int) -> Page[TagDTO]:
        return self.repo.find_all_paged(page_number, page_size).map(to_dto)

    def retrieve_tag_by_id(self, tag_id: int) -> TagDTO:
        tag = self.repo.find_by_id(tag_id)
        if tag is None:
            raise NotFoundError(f"Tag {tag_id} not found")
        return to_dto(tag)

    def find_tag_by_name(self, fragment: str) -> List[Tag]:
        return self.repo.find_by_name_containing(fragment)

    def retrieve_tag_by_name(self, name: str) -> Tag:
        tag = self.repo.find_by_name_exact(name)
        if tag is None:
            raise NotFoundError(f"Tag named {name!r} not found")
        return tag

    def update_tag(self, tag: TagDTO) -> TagDTO:
        updated = self.repo.update_by_id(to_domain_from_replace(tag))
        if updated is None:
            raise NotFoundError(f"Tag {tag.id} not found")
        return to_dto(updated)

    def delete_tag(self, tag_id: int) -> bool:
        return self.repo.delete_by_id(tag_id)
