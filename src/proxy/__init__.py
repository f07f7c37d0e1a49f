"""
Proxy layer: proxy 테스트 하네스용 요청 핸들러.

역할:
- 요청/응답 값 객체 (handlers.py)
- echo 핸들러 (echo.py)
"""

from .echo import EchoHandler
from .handlers import ProxyHandler, ProxyRequest, ProxyResponse

__all__ = [
    "ProxyRequest",
    "ProxyResponse",
    "ProxyHandler",
    "EchoHandler",
]
