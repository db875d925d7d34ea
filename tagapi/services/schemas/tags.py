# tagapi/services/schemas/tags.py
from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tagapi.domain.entities.tag import TAG_ID_MAX, TAG_NAME_MAX_LENGTH


class TagDTO(BaseModel):
    """Wire shape of a Tag; `id` is ignored on create and required on update."""
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=TAG_NAME_MAX_LENGTH)


class TagReplace(TagDTO):
    id: int = Field(..., ge=1, le=TAG_ID_MAX)
