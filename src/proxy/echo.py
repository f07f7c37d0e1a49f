"""
Echo 핸들러: 요청 body를 그대로 응답 body로.

    $ curl -d "echo? echo? echo..." localhost:5000/echo
    echo? echo? echo...
"""

from src.proxy.handlers import ProxyRequest, ProxyResponse


class EchoHandler:
    """요청 body를 변환/검증 없이 돌려준다."""

    def handle(self, request: ProxyRequest) -> ProxyResponse:
        response = ProxyResponse()
        response.body = request.body
        return response
