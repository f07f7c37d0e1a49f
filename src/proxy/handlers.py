"""
Proxy 요청/응답 값 객체와 핸들러 인터페이스.

하네스와의 계약은 body 필드뿐. 나머지 필드는 HTTP 매핑용.
"""

from dataclasses import dataclass, field
from typing import Protocol

Body = str | bytes


@dataclass
class ProxyRequest:
    """하네스가 핸들러에 넘기는 요청."""

    body: Body = ""
    method: str = "POST"
    path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class ProxyResponse:
    """핸들러가 돌려주는 응답."""

    body: Body = ""
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)


class ProxyHandler(Protocol):
    """route 하나에 등록되는 핸들러 인터페이스."""

    def handle(self, request: ProxyRequest) -> ProxyResponse:
        """요청 → 응답."""
        ...
