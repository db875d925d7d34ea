# tagapi/database/models/tag.py
from __future__ import annotations

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tagapi.database.core.main import Base
from tagapi.database.core.service_object import ServiceObject


# =======================
# Tags
# =======================
class Tag(ServiceObject, Base):
    __tablename__ = "tag"
    __table_args__ = (
        UniqueConstraint("name", name="uq_tag_name"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Tag id={self.id!r} name={self.name!r}>"
