from chatbff.web.routers.auth import router as auth_router
from chatbff.web.routers.content import router as content_router
from chatbff.web.routers.conversations import router as conversations_router
from chatbff.web.routers.fallback import router as fallback_router
from chatbff.web.routers.filters import router as filters_router
from chatbff.web.routers.metadata import router as metadata_router
from chatbff.web.routers.rag import router as rag_router

__all__ = [
    "auth_router",
    "content_router",
    "conversations_router",
    "fallback_router",
    "filters_router",
    "metadata_router",
    "rag_router",
]
