"""
Core layer: 설정 로드.
"""

from .config import (
    ServerConfig,
    TemplatizeConfig,
    load_config,
    load_server_config,
    load_templatize_config,
)

__all__ = [
    "load_config",
    "load_templatize_config",
    "load_server_config",
    "TemplatizeConfig",
    "ServerConfig",
]
