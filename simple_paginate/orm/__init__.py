from simple_paginate.orm.mixin import SimplePaginateMixin
from simple_paginate.orm.query import CollectionQuery, ModelQuery

__all__ = ["CollectionQuery", "ModelQuery", "SimplePaginateMixin"]
