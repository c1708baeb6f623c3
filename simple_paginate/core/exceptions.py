import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PaginateError(Exception):
    """Base exception for the pagination helpers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: object = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidPaginationError(PaginateError):
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "INVALID_PAGINATION"

    def __init__(self, field: str, value: object) -> None:
        super().__init__(
            f"Pagination parameter '{field}' must be a positive integer, got {value!r}",
            details={"field": field, "value": value},
        )


class InvalidPageError(InvalidPaginationError):
    error_code = "INVALID_PAGE"

    def __init__(self, value: object) -> None:
        super().__init__("page", value)


class InvalidLimitError(InvalidPaginationError):
    error_code = "INVALID_LIMIT"

    def __init__(self, value: object) -> None:
        super().__init__("limit", value)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PaginateError)
    async def paginate_exception_handler(request: Request, exc: PaginateError) -> JSONResponse:
        log_fn = logger.error if exc.status_code >= 500 else logger.warning
        log_fn(
            exc.error_code,
            extra={
                "error_code": exc.error_code,
                "status_code": exc.status_code,
                "path": request.url.path,
                "detail": exc.message,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {"code": exc.error_code, "message": exc.message, "details": exc.details}
            },
        )
