"""
FastAPI 애플리케이션 진입점 (proxy 테스트 하네스).

실행:
- 개발: uv run uvicorn src.app.main:app --reload --port 5000
- 직접: uv run python -m src.app.main

    $ curl -d "echo? echo? echo..." localhost:5000/echo
    echo? echo? echo...
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.routes import proxy
from src.core.config import load_config, load_server_config

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드
    """
    app.state.config = load_config()
    app.state.server = load_server_config(app.state.config)

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Gateway Proxy Test Harness",
    description="proxy 테스트용 요청 핸들러 (echo 등)",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Routes
# =============================================================================

@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


app.include_router(proxy.api_router, prefix="/api/proxy", tags=["Proxy API"])
# catch-all /{route} 이므로 마지막에 등록
app.include_router(proxy.router, prefix="", tags=["Proxy"])


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server = load_server_config(load_config())
    uvicorn.run(
        "src.app.main:app",
        host=server.host,
        port=server.port,
        reload=True,
    )
