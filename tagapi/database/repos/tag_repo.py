# tagapi/database/repos/tag_repo.py
from __future__ import annotations
from typing import List, Optional, Sequence

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from tagapi.database.models.tag import Tag as DBTag
from tagapi.database.repos._mapping import to_domain_tag
from tagapi.domain.dataclasses.page import Page
from tagapi.domain.entities.tag import Tag
from tagapi.domain.errors import InvalidArgumentError


class SqlAlchemyTagRepo:
    """
    TagRepository backed by a SQLAlchemy Session.
    Writes are flushed (so ids are populated) but never committed here;
    the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.db = session

    # ---------- Reads ----------

    def find_by_id(self, tag_id: int) -> Optional[Tag]:
        row = self.db.get(DBTag, tag_id)
        return to_domain_tag(row) if row else None

    def find_by_name_containing(self, fragment: str) -> List[Tag]:
        """Case-sensitive substring match, ordered by name."""
        stmt = (
            select(DBTag)
            .where(DBTag.name.contains(fragment or "", autoescape=True))
            .order_by(DBTag.name.asc(), DBTag.id.asc())
        )
        return [to_domain_tag(r) for r in self.db.execute(stmt).scalars().all()]

    def find_by_name_exact(self, name: str) -> Optional[Tag]:
        stmt = select(DBTag).where(DBTag.name == name).limit(1)
        row = self.db.execute(stmt).scalars().first()
        return to_domain_tag(row) if row else None

    def find_all_paged(self, page: int, size: int) -> Page[Tag]:
        if page < 0:
            raise InvalidArgumentError("Page index must not be less than zero")
        if size < 1:
            raise InvalidArgumentError("Page size must not be less than one")

        total = self.db.execute(select(func.count()).select_from(DBTag)).scalar_one()
        stmt = select(DBTag).order_by(DBTag.id.asc()).offset(page * size).limit(size)
        rows = self.db.execute(stmt).scalars().all()
        return Page(
            content=[to_domain_tag(r) for r in rows],
            number=page,
            size=size,
            total_elements=total,
        )

    # ---------- Writes ----------

    def save_all(self, tags: Sequence[Tag]) -> List[Tag]:
        rows = [DBTag(name=t.name) for t in tags]
        if not rows:
            return []
        self.db.add_all(rows)
        self.db.flush()  # populate ids, keep submission order
        return [to_domain_tag(r) for r in rows]

    def update_by_id(self, tag: Tag) -> Optional[Tag]:
        if tag.id is None:
            raise InvalidArgumentError("Tag id is required for update")
        row = self.db.get(DBTag, tag.id)
        if not row:
            return None
        row.name = tag.name
        self.db.flush()
        return to_domain_tag(row)

    def delete_by_id(self, tag_id: int) -> bool:
        row = self.db.get(DBTag, tag_id)
        if not row:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
