from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.platform.logger import get_logger
from app.platform.response import api_response

logger = get_logger(__name__)


class ScannerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = status.HTTP_400_BAD_REQUEST
    title = "Scan Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidScanUrl(ScannerError):
    title = "Invalid URL"


class MissingScanUrl(InvalidScanUrl):
    title = "URL Required"


class ScanAlreadyRunning(ScannerError):
    status_code = status.HTTP_409_CONFLICT
    title = "Scan In Progress"


class InvalidTransition(ScannerError):
    status_code = status.HTTP_409_CONFLICT
    title = "Invalid State"


class ScanExecutionError(ScannerError):
    status_code = status.HTTP_502_BAD_GATEWAY
    title = "Scan Failed"


class ScanResultNotFound(ScannerError):
    status_code = status.HTTP_404_NOT_FOUND
    title = "No Results"


def add_exception_handlers(app):
    @app.exception_handler(ScannerError)
    async def scanner_exception_handler(request: Request, exc: ScannerError):
        logger.warning(f"{exc.title} on {request.url.path}: {exc.message}")
        return api_response(message=exc.message, status_code=exc.status_code, title=exc.title)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return api_response(
            message="Validation failed",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            data={"errors": exc.errors()},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
