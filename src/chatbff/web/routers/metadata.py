"""Service metadata endpoints: health and endpoint index."""

from typing import Any

from fastapi import APIRouter

from chatbff.utils import now
from chatbff.web.deps import AppDep
from chatbff.web.openapi import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["metadata"])

ENDPOINTS = {
    "health": "/health",
    "auth": {
        "login": "POST /auth/login",
        "logout": "POST /auth/logout",
        "me": "GET /auth/me",
    },
    "api": {
        "rag": "POST /api/rag",
        "conversations": "GET /api/conversations",
        "createConversation": "POST /api/conversations",
        "getConversation": "GET /api/conversations/:id",
        "updateConversation": "PUT /api/conversations/:id",
        "deleteConversation": "DELETE /api/conversations/:id",
        "filters": "GET /api/filters",
        "updateFilters": "PUT /api/filters",
        "changelog": "GET /api/changelog",
        "onboarding": "GET /api/onboarding",
        "about": "GET /api/about",
    },
}


@router.get(
    "/health",
    summary="Health check",
    description="Liveness probe with a summary of the non-secret configuration.",
    operation_id="healthCheck",
)
async def health_check(app: AppDep) -> dict[str, Any]:
    config = app.config
    return {
        "status": "ok",
        "timestamp": now().isoformat(),
        "config": {
            "allowedDomains": config.allowed_domains,
            "ragApiUrl": config.rag_api_url,
            "port": config.port,
        },
    }


@router.get(
    "/",
    summary="Service index",
    description="Name, version and the list of endpoints exposed by the BFF.",
    operation_id="getServiceIndex",
)
async def service_index() -> dict[str, Any]:
    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": "Backend-for-Frontend for Chat Application",
        "endpoints": ENDPOINTS,
    }
