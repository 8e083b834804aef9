from fastapi import APIRouter, Depends, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from chatbff.errors import NotFoundError
from chatbff.web.deps import get_session

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]

# Registered last: catches every /api request no other route fully matched,
# so the session check runs before any 404 or 405 is reported.
router = APIRouter(prefix="/api", dependencies=[Depends(get_session)], include_in_schema=False)


@router.api_route("", methods=METHODS)
@router.api_route("/{path:path}", methods=METHODS)
async def api_fallback(request: Request) -> None:
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.PARTIAL:
            raise StarletteHTTPException(status_code=405, detail="Method Not Allowed")
    raise NotFoundError()
