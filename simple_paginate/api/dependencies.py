from typing import Any

from fastapi import Query

from simple_paginate.core.options import PaginationOptions


class SimplePaginationParams:
    """Query-string pagination for ``simple_paginate``.

    ``page`` and ``limit`` are taken as raw strings so malformed values fall
    back to the defaults instead of failing request validation.
    """

    def __init__(
        self,
        page: str | None = Query(default=None, description="1-based page number"),
        limit: str | None = Query(default=None, description="Number of items per page"),
    ) -> None:
        self.page = page
        self.limit = limit

    def to_options(self, **fetch_options: Any) -> PaginationOptions:
        """Build options, adding ``fetch_options`` (e.g. ``with_related``) for the fetch."""
        return PaginationOptions.from_mapping(
            {"page": self.page, "limit": self.limit, **fetch_options}
        )

    @property
    def options(self) -> PaginationOptions:
        return self.to_options()
