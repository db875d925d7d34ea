# tagapi/database/repos/_mapping.py
from __future__ import annotations
from tagapi.database.models.blob import Blob as DBBlob
from tagapi.database.models.tag import Tag as DBTag
from tagapi.domain.entities.blob import Blob as DomainBlob
from tagapi.domain.entities.tag import Tag as DomainTag


def to_domain_tag(row: DBTag) -> DomainTag:
    return DomainTag(id=row.id, name=row.name)


def to_domain_blob(row: DBBlob) -> DomainBlob:
    return DomainBlob(id=row.id, data=row.data, name=row.name, content_type=row.content_type)
