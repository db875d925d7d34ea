# tagapi/database/models/__init__.py

from tagapi.database.core.main import Base
from tagapi.database.models.tag import Tag
from tagapi.database.models.blob import Blob

__all__ = [
    "Base",
    "Tag",
    "Blob",
]
