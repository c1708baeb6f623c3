from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class PaginationLinks(BaseModel):
    previous: int | None
    next: int | None


class PaginationMeta(BaseModel):
    count: int
    per_page: int
    current_page: int
    links: PaginationLinks

    @classmethod
    def build(
        cls, count: int, per_page: int, current_page: int, has_next_page: bool
    ) -> "PaginationMeta":
        return cls(
            count=count,
            per_page=per_page,
            current_page=current_page,
            links=PaginationLinks(
                previous=current_page - 1 if current_page > 1 else None,
                next=current_page + 1 if has_next_page else None,
            ),
        )


class ResultMeta(BaseModel):
    pagination: PaginationMeta


class PaginatedResult(BaseModel, Generic[T]):
    """One page of rows plus its pagination metadata.

    ``data`` holds whatever the fetch returned (ORM instances or rows), so
    arbitrary types are allowed; API layers convert them to response schemas
    before serialising.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    data: list[T]
    meta: ResultMeta

    @property
    def pagination(self) -> PaginationMeta:
        return self.meta.pagination

    def map(self, fn: Callable[[T], Any]) -> "PaginatedResult[Any]":
        """Return a copy with ``fn`` applied to every row, keeping ``meta``."""
        return PaginatedResult(data=[fn(row) for row in self.data], meta=self.meta)
