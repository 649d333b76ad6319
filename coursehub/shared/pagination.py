"""Limit/offset paging for admin listings."""

from __future__ import annotations

from typing import Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, computed_field

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


class PageWindow(BaseModel):
    """Requested slice of a listing."""

    limit: int
    offset: int


def page_window(
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
) -> PageWindow:
    return PageWindow(limit=limit, offset=offset)


class Page(BaseModel, Generic[T]):
    """One slice of a listing together with the unpaged total."""

    items: list[T]
    total: int
    limit: int
    offset: int

    @computed_field
    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total

    @classmethod
    def of(cls, items: list[T], total: int, window: PageWindow) -> "Page[T]":
        return cls(items=items, total=total, limit=window.limit, offset=window.offset)
