# -*- coding: utf-8 -*-
"""
Paging primitives shared by repositories, services and views.

A ``Pageable`` is a zero-based page request plus an ordered list of sort keys. The
ordering it produces always ends with the primary key so that page
boundaries are stable when several rows share a sort key.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")

ASC = "asc"
DESC = "desc"
TIE_BREAK_FIELD = "id"


@dataclass(frozen=True)
class SortOrder:
    field: str
    direction: str = ASC

    def to_ordering(self) -> str:
        return f"-{self.field}" if self.direction == DESC else self.field


@dataclass(frozen=True)
class Pageable:
    page: int = 0
    size: int = 20
    sort: Tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size

    def ordering(self) -> List[str]:
        orders = list(self.sort)
        if not any(o.field == TIE_BREAK_FIELD for o in orders):
            orders.append(SortOrder(TIE_BREAK_FIELD, ASC))
        return [o.to_ordering() for o in orders]


@dataclass(frozen=True)
class Page(Generic[T]):
    content: List[T]
    total: int
    pageable: Pageable = field(default_factory=Pageable)

    @property
    def total_pages(self) -> int:
        if self.pageable.size <= 0:
            return 1
        return (self.total + self.pageable.size - 1) // self.pageable.size

    @property
    def has_next(self) -> bool:
        return self.pageable.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.pageable.page > 0
