"""
Error definitions for the gateway admin tooling.

규칙:
- 파일 I/O 실패는 감싸지 않음 → OSError 그대로 전파
- 설정/라우팅 위반만 GatewayToolError로 명시적 실패
- HTTP 하네스는 코드별 status 로 응답 (ErrorCodes.HTTP_STATUS)
"""

from typing import Any


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Config ===
    INVALID_CONFIG = "INVALID_CONFIG"  # default.yaml / CLI 값 오류

    # === Proxy ===
    HANDLER_NOT_FOUND = "HANDLER_NOT_FOUND"  # 미등록 route

    # 하네스 응답 status (없으면 500)
    HTTP_STATUS = {
        HANDLER_NOT_FOUND: 404,
    }


class GatewayToolError(Exception):
    """
    설정 또는 핸들러 라우팅 위반.

    context 키 관례:
    - key: 문제된 설정 키 (예: "templatize.suffix", "server")
    - value: 거부된 값
    - route: 미등록 proxy route

    Usage:
        raise GatewayToolError(ErrorCodes.INVALID_CONFIG, key="templatize.suffix", value="")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in context.items())
        super().__init__(f"[{code}] {ctx_str}".rstrip())

    @property
    def http_status(self) -> int:
        """하네스가 돌려줄 HTTP status."""
        return ErrorCodes.HTTP_STATUS.get(self.code, 500)

    def to_dict(self) -> dict[str, Any]:
        """HTTPException detail / 로그용. 값은 JSON 안전하게 repr 처리."""
        return {
            "code": self.code,
            "message": str(self),
            **{
                k: v if isinstance(v, (str, int, float, bool, type(None))) else repr(v)
                for k, v in self.context.items()
            },
        }
