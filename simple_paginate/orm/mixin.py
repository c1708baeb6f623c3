from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from simple_paginate.config import Settings
from simple_paginate.core.options import PaginationOptions
from simple_paginate.orm.query import ModelQuery
from simple_paginate.schemas.pagination import PaginatedResult


class SimplePaginateMixin:
    """Adds ``query()`` and ``simple_paginate()`` to a declarative model.

    ::

        class Car(SimplePaginateMixin, Base):
            __tablename__ = "cars"
            ...

        page = await Car.simple_paginate(session, {"page": 2, "limit": 15})

        sweden = Car.query(session).join(Car.manufacturer).where(Manufacturer.country == "Sweden")
        page = await sweden.simple_paginate({"page": 3, "with_related": ["engine"]})
    """

    @classmethod
    def query(cls, session: AsyncSession) -> ModelQuery:
        return ModelQuery(session, cls)

    @classmethod
    async def simple_paginate(
        cls,
        session: AsyncSession,
        options: Mapping[str, Any] | PaginationOptions | None = None,
        *,
        strict: bool | None = None,
        settings: Settings | None = None,
    ) -> PaginatedResult[Any]:
        return await cls.query(session).simple_paginate(options, strict=strict, settings=settings)
