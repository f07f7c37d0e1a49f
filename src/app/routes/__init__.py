"""
FastAPI Routes.

proxy 핸들러 디스패치 + API 라우트
"""

from . import proxy

__all__ = ["proxy"]
