"""
SQLAlchemy query handles for the paginator.

``ModelQuery`` wraps ``select(Model)`` and yields model instances (one entity
per row). ``CollectionQuery`` wraps any ``Select`` and yields rows, which may
hold several entities or columns. Both are generative: every builder method
returns a new handle and leaves the original untouched, so one handle can be
paginated repeatedly or concurrently.

Fetch options understood by both handles:

    with_related       relationship names to eager-load (``"engine.parts"`` nests)
    columns            attribute names to load, via ``load_only``
    require            raise ``NoResultFound`` when the page is empty
    execution_options  passed to ``Select.execution_options``

Anything else is ignored.
"""

import copy
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, Self

from sqlalchemy import Select, select
from sqlalchemy.exc import InvalidRequestError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only, selectinload

from simple_paginate.paginator import Paginatable

logger = logging.getLogger(__name__)

FETCH_OPTION_KEYS = frozenset({"with_related", "columns", "require", "execution_options"})


def _relationship_loader(model: type, path: str) -> Any:
    """Build a chained ``selectinload`` for a dotted relationship path."""
    loader: Any = None
    current = model
    for name in path.split("."):
        relationships = current.__mapper__.relationships  # type: ignore[attr-defined]
        if name not in relationships:
            raise InvalidRequestError(f"{current.__name__} has no relationship '{name}'")
        attr = getattr(current, name)
        loader = selectinload(attr) if loader is None else loader.selectinload(attr)
        current = relationships[name].mapper.class_
    return loader


def _columns_loader(model: type, columns: Iterable[str]) -> Any:
    attrs = []
    for name in columns:
        if name not in model.__mapper__.column_attrs:  # type: ignore[attr-defined]
            raise InvalidRequestError(f"{model.__name__} has no column '{name}'")
        attrs.append(getattr(model, name))
    return load_only(*attrs)


class _SelectQuery(Paginatable):
    def __init__(self, session: AsyncSession, statement: Select[Any]) -> None:
        self._session = session
        self._statement = statement

    @property
    def statement(self) -> Select[Any]:
        return self._statement

    @property
    def primary_entity(self) -> type | None:
        """Mapped class of the first selected entity, if the select has one."""
        return self._statement.column_descriptions[0].get("entity")

    def _with(self, statement: Select[Any]) -> Self:
        clone = copy.copy(self)
        clone._statement = statement
        return clone

    def clone_query(self) -> Self:
        return self._with(self._statement)

    def limit(self, limit: int) -> Self:
        return self._with(self._statement.limit(limit))

    def offset(self, offset: int) -> Self:
        return self._with(self._statement.offset(offset))

    def where(self, *criteria: Any) -> Self:
        return self._with(self._statement.where(*criteria))

    def order_by(self, *clauses: Any) -> Self:
        return self._with(self._statement.order_by(*clauses))

    def join(self, target: Any, *props: Any, **kwargs: Any) -> Self:
        return self._with(self._statement.join(target, *props, **kwargs))

    def options(self, *options: Any) -> Self:
        return self._with(self._statement.options(*options))

    def query(self, fn: Callable[[Select[Any]], Select[Any]]) -> Self:
        """Return a handle whose statement is ``fn(statement)``.

        Useful for building joins, groupings and filters in one place::

            Car.query(session).query(
                lambda q: q.join(Manufacturer).where(Manufacturer.country == "Sweden")
            )
        """
        return self._with(fn(self._statement))

    def _prepare(self, options: Mapping[str, Any]) -> Select[Any]:
        statement = self._statement
        unknown = sorted(set(options) - FETCH_OPTION_KEYS)
        if unknown:
            logger.debug("Ignoring unknown fetch options", extra={"options": unknown})

        entity = self.primary_entity
        loaders: list[Any] = []
        if options.get("with_related"):
            if entity is None:
                raise InvalidRequestError("with_related requires an ORM entity in the select")
            loaders.extend(_relationship_loader(entity, path) for path in options["with_related"])
        if options.get("columns"):
            if entity is None:
                raise InvalidRequestError("columns requires an ORM entity in the select")
            loaders.append(_columns_loader(entity, options["columns"]))
        if loaders:
            statement = statement.options(*loaders)

        if options.get("execution_options"):
            statement = statement.execution_options(**options["execution_options"])
        return statement

    def _check_required(self, rows: Sequence[Any], options: Mapping[str, Any]) -> None:
        if options.get("require") and not rows:
            raise NoResultFound("No rows found for paginated query")

    async def fetch_one(self, options: Mapping[str, Any]) -> Sequence[Any]:
        result = await self._session.scalars(self._prepare(options))
        rows = list(result.unique())
        self._check_required(rows, options)
        return rows

    async def fetch_many(self, options: Mapping[str, Any]) -> Sequence[Any]:
        result = await self._session.execute(self._prepare(options))
        rows = list(result.all())
        self._check_required(rows, options)
        return rows


class ModelQuery(_SelectQuery):
    """Single-entity handle: ``select(model)`` returning model instances."""

    single_entity = True

    def __init__(
        self, session: AsyncSession, model: type, statement: Select[Any] | None = None
    ) -> None:
        super().__init__(session, statement if statement is not None else select(model))
        self.model = model


class CollectionQuery(_SelectQuery):
    """Multi-entity handle: any ``Select``, returning ``Row`` objects."""

    single_entity = False
