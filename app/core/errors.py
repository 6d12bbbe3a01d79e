"""
API error types and their FastAPI exception handlers.

Services raise these exceptions; the handlers below turn them into
responses of the form {"error": "<message>"}.

    APIError (base, 500)
    ├── BadRequestError (400)
    │   └── DuplicateAccountError
    ├── NotFoundError (404)
    │   ├── AccountNotFoundError
    │   └── InvalidAccountReferenceError
    └── InternalError (500)
        └── NotificationError
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging import get_logger

logger = get_logger("errors")

INVALID_PAYLOAD = "Invalid request payload"


class APIError(Exception):
    """Base class for errors reported to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(message)


class BadRequestError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DuplicateAccountError(BadRequestError):
    """Raised when the id-card number is already registered."""

    def __init__(self):
        super().__init__("Account exists!")


class AccountNotFoundError(NotFoundError):
    """Raised when no account row has the requested id."""

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__("Account not found")


class InvalidAccountReferenceError(NotFoundError):
    """Raised when a deposit names a destination or sender that does not exist."""

    def __init__(self):
        super().__init__("Invalid Account ID")


class NotificationError(InternalError):
    """Raised when the deposit e-mail could not be delivered."""


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.
    Called once from main.py.
    """

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected payload on %s %s: %s", request.method, request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_PAYLOAD)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__)
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
