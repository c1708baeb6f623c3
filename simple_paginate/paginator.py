"""
Over-fetch-by-one pagination.

A page of ``limit`` rows is read by asking the data source for ``limit + 1``
rows. If the extra row comes back a next page exists; it is then dropped from
the returned data. No ``COUNT`` query is ever issued, so the metadata reports
the size of the current page only.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Self

from simple_paginate.config import Settings
from simple_paginate.core.options import PaginationOptions
from simple_paginate.schemas.pagination import PaginatedResult, PaginationMeta, ResultMeta

logger = logging.getLogger(__name__)


class Paginatable(ABC):
    """Query handle the paginator works against.

    ``single_entity`` selects which fetch runs: handles yielding one entity per
    row use ``fetch_one``, handles yielding multi-entity rows use
    ``fetch_many``. ``limit`` and ``offset`` may mutate and return ``self``;
    the paginator only ever calls them on a fresh ``clone_query()``.
    """

    single_entity: bool = True

    @abstractmethod
    def clone_query(self) -> Self: ...

    @abstractmethod
    def limit(self, limit: int) -> Self: ...

    @abstractmethod
    def offset(self, offset: int) -> Self: ...

    @abstractmethod
    async def fetch_one(self, options: Mapping[str, Any]) -> Sequence[Any]: ...

    @abstractmethod
    async def fetch_many(self, options: Mapping[str, Any]) -> Sequence[Any]: ...

    async def simple_paginate(
        self,
        options: Mapping[str, Any] | PaginationOptions | None = None,
        *,
        strict: bool | None = None,
        settings: Settings | None = None,
    ) -> PaginatedResult[Any]:
        return await simple_paginate(self, options, strict=strict, settings=settings)


async def simple_paginate(
    source: Paginatable,
    options: Mapping[str, Any] | PaginationOptions | None = None,
    *,
    strict: bool | None = None,
    settings: Settings | None = None,
) -> PaginatedResult[Any]:
    """Fetch one page from ``source``.

    ``options`` may carry ``page`` (default 1) and ``limit`` (default 10);
    every other key except ``offset`` is passed to the fetch untouched, e.g.
    ``{"page": 3, "limit": 15, "with_related": ["engine"]}``.

    Errors raised by the fetch propagate unchanged.
    """
    if not isinstance(options, PaginationOptions):
        options = PaginationOptions.from_mapping(options, strict=strict, settings=settings)

    limit, page = options.limit, options.page
    window = source.clone_query().limit(limit + 1).offset(options.offset)

    fetch = window.fetch_one if window.single_entity else window.fetch_many
    rows = await fetch(options.fetch_options)

    fetched = len(rows)
    has_next_page = fetched == limit + 1

    logger.debug(
        "Page fetched",
        extra={
            "page": page,
            "limit": limit,
            "offset": options.offset,
            "fetched": fetched,
            "has_next_page": has_next_page,
        },
    )

    pagination = PaginationMeta.build(
        count=limit if has_next_page else fetched,
        per_page=limit,
        current_page=page,
        has_next_page=has_next_page,
    )
    return PaginatedResult(data=list(rows[:limit]), meta=ResultMeta(pagination=pagination))
