import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatbff.errors import AccessDeniedError, AuthenticationError, NotFoundError, UpstreamError, ValidationError

logger = structlog.get_logger(__name__)


def create_json_error_response(
    status_code: int, error: str, error_type: str | None = None, message: str | None = None
) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"error": error}
    if message:
        content["message"] = message
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    message = None
    if isinstance(exc, AuthenticationError):
        status_code = 401
        error_type = "authentication_error"
    elif isinstance(exc, AccessDeniedError):
        status_code = 403
        error_type = "access_denied"
        message = exc.detail
    elif isinstance(exc, NotFoundError):
        status_code = 404
        error_type = "not_found"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = "validation_error"
    elif isinstance(exc, UpstreamError):
        status_code = 500
        error_type = "upstream_error"
    else:
        # Default for any other UserError subclass
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, error=str(exc), error_type=error_type, message=message)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Malformed request bodies are reported as 400, not FastAPI's 422."""
    return create_json_error_response(status_code=400, error="Invalid request body", error_type="validation_error")


async def http_exception_handler(_: Request, exc: Exception) -> Response:
    """Render framework HTTP errors (unmatched routes, wrong methods) in the common shape."""
    status_code = exc.status_code if isinstance(exc, StarletteHTTPException) else 500
    if status_code == 404:
        return create_json_error_response(status_code=404, error="Not found", error_type="not_found")
    detail = exc.detail if isinstance(exc, StarletteHTTPException) else str(exc)
    return create_json_error_response(status_code=status_code, error=str(detail), error_type="http_error")


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500). The message is echoed for debugging."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, error="Internal server error", error_type="internal_server_error", message=str(exc)
    )
