"""
Normalisation of caller-supplied pagination options.

``page`` and ``limit`` are read leniently: a missing, falsy or unparseable
value falls back to the configured default instead of raising. Values that do
parse are kept as-is, including zero-from-a-string and negative numbers,
unless strict mode is enabled.
"""

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from simple_paginate.config import Settings, settings as default_settings
from simple_paginate.core.exceptions import InvalidLimitError, InvalidPageError

logger = logging.getLogger(__name__)

# Keys consumed by pagination itself and never forwarded to the fetch
RESERVED_KEYS = frozenset({"page", "limit", "offset"})

_LEADING_INT = re.compile(r"[+-]?\d+")


def _parse_int(value: object) -> int | None:
    if not value or isinstance(value, bool):
        return None

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, (list, tuple)):
        value = ",".join(str(item) for item in value)

    match = _LEADING_INT.match(str(value).strip())
    return int(match.group()) if match else None


def ensure_int_with_default(value: object, default: int) -> int:
    """Parse ``value`` as an integer, returning ``default`` when that fails.

    Falsiness is judged on the raw value, so ``0``, ``None`` and ``""`` give
    the default while the string ``"0"`` parses to ``0``. Strings are read up
    to the first non-digit (``"12abc"`` -> 12, ``"3.7"`` -> 3); lists are
    comma-joined first (``["3"]`` -> 3).
    """
    parsed = _parse_int(value)
    return default if parsed is None else parsed


@dataclass(frozen=True)
class PaginationOptions:
    page: int
    limit: int
    fetch_options: dict[str, Any] = field(default_factory=dict)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_mapping(
        cls,
        options: Mapping[str, Any] | None = None,
        *,
        strict: bool | None = None,
        settings: Settings | None = None,
    ) -> "PaginationOptions":
        settings = settings or default_settings
        if strict is None:
            strict = settings.strict_pagination
        options = options or {}

        page = _resolve(options, "page", settings.default_page)
        limit = _resolve(options, "limit", settings.default_limit)

        if strict:
            if page < 1:
                raise InvalidPageError(page)
            if limit < 1:
                raise InvalidLimitError(limit)

        # Built additively so the caller's mapping is never touched
        fetch_options = {key: value for key, value in options.items() if key not in RESERVED_KEYS}
        return cls(page=page, limit=limit, fetch_options=fetch_options)


def _resolve(options: Mapping[str, Any], key: str, default: int) -> int:
    raw = options.get(key)
    parsed = _parse_int(raw)
    if parsed is None:
        if raw is not None:
            logger.debug("Pagination value defaulted", extra={"key": key, "raw": repr(raw)})
        return default
    return parsed
