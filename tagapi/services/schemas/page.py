# tagapi/services/schemas/page.py
from __future__ import annotations
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class PageRead(BaseModel, Generic[T]):
    model_config = ConfigDict(from_attributes=True)

    content: List[T]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool
