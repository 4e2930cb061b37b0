"""Exception handlers to translate domain exceptions to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.domain.exceptions import (
    CategoryException,
    CategoryNotFound,
    CategoryPersistenceError,
    DomainException,
    InvalidCategoryMove,
    ParentCategoryNotFound,
)
from app.utils.logger import get_logger

logger = get_logger("exception_handlers")


class DomainExceptionHandler:
    """Centralized handler for domain exceptions."""

    # Mapping of domain exceptions to HTTP status codes
    EXCEPTION_STATUS_MAP = {
        CategoryNotFound: status.HTTP_404_NOT_FOUND,
        ParentCategoryNotFound: status.HTTP_404_NOT_FOUND,
        InvalidCategoryMove: status.HTTP_400_BAD_REQUEST,
        CategoryPersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    # Base exception type status codes
    BASE_EXCEPTION_STATUS_MAP = {
        CategoryException: status.HTTP_400_BAD_REQUEST,
    }

    @classmethod
    def status_for(cls, exc: DomainException) -> int:
        # Try to find specific exception mapping first
        status_code = cls.EXCEPTION_STATUS_MAP.get(type(exc))

        # Fall back to base exception type mapping
        if status_code is None:
            for base_type, base_status in cls.BASE_EXCEPTION_STATUS_MAP.items():
                if isinstance(exc, base_type):
                    status_code = base_status
                    break

        # Final fallback
        if status_code is None:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        return status_code

    @classmethod
    def handle_domain_exception(cls, exc: DomainException) -> JSONResponse:
        """Convert domain exception to an error response."""
        return JSONResponse(
            status_code=cls.status_for(exc),
            content={
                "status": False,
                "message": exc.message,
                "error_code": exc.error_code,
            },
        )

    @classmethod
    def handle_store_exception(cls, exc: SQLAlchemyError) -> JSONResponse:
        """Unclassified store failures surface as a generic internal error."""
        logger.error(f"Unhandled database error: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": False,
                "message": "Internal server error",
                "error_code": "INTERNAL_ERROR",
            },
        )


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    return DomainExceptionHandler.handle_domain_exception(exc)


async def store_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    return DomainExceptionHandler.handle_store_exception(exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_exception_handler)
