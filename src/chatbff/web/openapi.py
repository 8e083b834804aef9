from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

SERVICE_NAME = "Chat App BFF"
SERVICE_VERSION = "1.0.0"


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=SERVICE_NAME,
            version=SERVICE_VERSION,
            summary="Backend-for-Frontend for the chat application",
            routes=app.routes,
        )

        # Logout reads the session header but works without it
        public_endpoints = {
            ("POST", "/auth/logout"),
        }

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in public_endpoints:
                    operation.pop("security", None)

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")
    message: str | None = Field(None, description="Additional detail, when available")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"error": "Invalid or expired session", "type": "authentication_error"},
                {
                    "error": "Domain not authorized",
                    "type": "access_denied",
                    "message": 'The email domain "other.org" is not authorized to access this application.',
                },
                {"error": "RAG query failed", "type": "upstream_error"},
            ]
        }
    }
