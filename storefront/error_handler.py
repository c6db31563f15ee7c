"""Error handling helpers for the storefront API."""
from typing import Any, Dict, Optional
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.errors import StorefrontError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An internal error occurred while processing your request. Please try again later."


class ErrorHandler:
    def user_message(self, exc: Exception, default: str = GENERIC_ERROR_MESSAGE) -> str:
        if isinstance(exc, StorefrontError):
            return exc.message
        return default

    def status_code(self, exc: Exception) -> int:
        if isinstance(exc, StorefrontError):
            return exc.status_code
        return 500

    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if isinstance(exc, StorefrontError):
            logger.warning("%s: %s (context=%s)", type(exc).__name__, exc.message, context or {})
        else:
            logger.error("Unhandled exception in storefront: %s", exc, exc_info=True)
        return {"success": False, "error": self.user_message(exc)}


error_handler = ErrorHandler()


async def storefront_exception_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    payload = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=error_handler.status_code(exc), content=payload)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    payload = error_handler.handle_exception(exc, context={"path": request.url.path})
    return JSONResponse(status_code=500, content=payload)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = ", ".join(".".join(str(part) for part in err.get("loc", ())) for err in exc.errors())
    logger.info("Rejected request to %s: invalid fields %s", request.url.path, fields)
    return JSONResponse(status_code=422, content={"success": False, "error": f"Invalid request: {fields}"})
