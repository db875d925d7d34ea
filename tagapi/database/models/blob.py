# tagapi/database/models/blob.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from tagapi.database.core.main import Base
from tagapi.database.core.service_object import ServiceObject


class Blob(ServiceObject, Base):
    """Opaque binary payload; write-only from the application's point of view."""
    __tablename__ = "blob"

    name: Mapped[Optional[str]] = mapped_column(String(255))
    content_type: Mapped[Optional[str]] = mapped_column(String(128))
    data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
