# tagapi/services/mappers/tag.py
from __future__ import annotations

from tagapi.domain.entities.tag import Tag
from tagapi.services.schemas.tags import TagDTO


def to_domain_from_create(s: TagDTO) -> Tag:
    # ids are system-assigned; whatever the client sent is dropped
    return Tag(name=s.name)


def to_domain_from_replace(s: TagDTO) -> Tag:
    return Tag(id=s.id, name=s.name)


def to_dto(t: Tag) -> TagDTO:
    return TagDTO(id=t.id, name=t.name)
