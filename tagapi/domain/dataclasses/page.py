# tagapi/domain/dataclasses/page.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Page(Generic[T]):
    """
    One slice of an ordered result set.

    `number` is zero-based; `total_elements` counts the whole set, so the
    remaining flags are derived rather than stored.
    """
    content: List[T] = field(default_factory=list)
    number: int = 0
    size: int = 0
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1 if self.content else 0
        return -(-self.total_elements // self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.number == 0

    @property
    def last(self) -> bool:
        return self.number + 1 >= self.total_pages

    @property
    def empty(self) -> bool:
        return not self.content

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            content=[fn(x) for x in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )
