# filmdb/domain/dataclasses/paging.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

from filmdb.domain.enums.sort_direction import SortDirection

T = TypeVar("T")


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: SortDirection = SortDirection.asc


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: Sequence[SortOrder] = ()

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page * self.size

    def clamp(self, max_size: int) -> "PageRequest":
        if self.size <= max_size:
            return self
        return PageRequest(page=self.page, size=max_size, sort=self.sort)

    def with_sort(self, sort: Sequence[SortOrder]) -> "PageRequest":
        return PageRequest(page=self.page, size=self.size, sort=tuple(sort))


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size if self.size else 0
