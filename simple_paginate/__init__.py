from simple_paginate.core.exceptions import (
    InvalidLimitError,
    InvalidPageError,
    InvalidPaginationError,
    PaginateError,
)
from simple_paginate.core.options import PaginationOptions, ensure_int_with_default
from simple_paginate.paginator import Paginatable, simple_paginate
from simple_paginate.schemas.pagination import PaginatedResult, PaginationLinks, PaginationMeta

__all__ = [
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidPaginationError",
    "Paginatable",
    "PaginateError",
    "PaginatedResult",
    "PaginationLinks",
    "PaginationMeta",
    "PaginationOptions",
    "ensure_int_with_default",
    "simple_paginate",
]
