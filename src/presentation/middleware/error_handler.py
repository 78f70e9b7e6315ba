"""Exception handlers mapping domain errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    CadenceMismatchException,
    ContractNotFoundException,
    DataAccessException,
    DomainException,
    InvalidBillingRequestException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(CadenceMismatchException)
    async def cadence_mismatch_handler(
        request: Request,
        exc: CadenceMismatchException,
    ) -> JSONResponse:
        return _error_response(422, exc.code, exc.message)

    @app.exception_handler(InvalidBillingRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidBillingRequestException,
    ) -> JSONResponse:
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(ContractNotFoundException)
    async def contract_not_found_handler(
        request: Request,
        exc: ContractNotFoundException,
    ) -> JSONResponse:
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(DataAccessException)
    async def data_access_handler(
        request: Request,
        exc: DataAccessException,
    ) -> JSONResponse:
        """Storage failures are logged in full but not exposed."""
        logger.error(
            "data_access_error",
            request_id=get_request_id(),
            operation=exc.operation,
            message=exc.message,
        )
        return _error_response(
            503,
            exc.code,
            "Contract store temporarily unavailable. Please try again.",
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
