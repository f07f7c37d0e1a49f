"""
Proxy Routes: 테스트 하네스 핸들러 디스패치.

- POST|PUT|PATCH /<route> → 등록된 핸들러 호출
- GET /api/proxy/routes → 등록된 route 목록
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from src.domain.constants import DEFAULT_CONTENT_TYPE, ECHO_ROUTE
from src.domain.errors import ErrorCodes, GatewayToolError
from src.proxy import EchoHandler, ProxyHandler, ProxyRequest

logger = logging.getLogger(__name__)

# Routers
router = APIRouter()  # handler dispatch
api_router = APIRouter()  # API endpoints

# route 이름 → 핸들러
_handlers: dict[str, ProxyHandler] = {}


# =============================================================================
# Handler Registry
# =============================================================================

def register_handler(route: str, handler: ProxyHandler) -> None:
    """route에 핸들러 등록 (같은 route는 덮어씀)."""
    _handlers[route.strip("/")] = handler


def get_handler(route: str) -> ProxyHandler:
    """
    route의 핸들러 조회.

    Raises:
        GatewayToolError: 등록되지 않은 route
    """
    handler = _handlers.get(route.strip("/"))
    if handler is None:
        raise GatewayToolError(ErrorCodes.HANDLER_NOT_FOUND, route=route)
    return handler


def list_routes() -> list[str]:
    """등록된 route 목록 (정렬)."""
    return sorted(_handlers)


register_handler(ECHO_ROUTE, EchoHandler())


# =============================================================================
# Dispatch
# =============================================================================

@router.api_route("/{route}", methods=["POST", "PUT", "PATCH"])
async def dispatch(request: Request, route: str) -> Response:
    """요청 body를 ProxyRequest로 감싸 핸들러에 전달."""
    try:
        handler = get_handler(route)
    except GatewayToolError as e:
        raise HTTPException(status_code=e.http_status, detail=e.to_dict()) from e

    body = await request.body()
    proxy_request = ProxyRequest(
        body=body,
        method=request.method,
        path=request.url.path,
        headers=dict(request.headers),
    )

    proxy_response = handler.handle(proxy_request)
    logger.debug(f"{request.method} /{route} → {proxy_response.status_code}")

    content = proxy_response.body
    if isinstance(content, str):
        content = content.encode("utf-8")

    return Response(
        content=content,
        status_code=proxy_response.status_code,
        headers=proxy_response.headers or None,
        media_type=request.headers.get("content-type", DEFAULT_CONTENT_TYPE),
    )


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("/routes")
async def routes() -> dict[str, Any]:
    """등록된 proxy route 목록."""
    return {"routes": list_routes()}
