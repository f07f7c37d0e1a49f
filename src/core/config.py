"""
설정 로드: default.yaml → dict / dataclass.

- 파일 없음 → 빈 설정 (기본값 사용)
- 잘못된 값 → GatewayToolError(INVALID_CONFIG)
"""

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_ENCODING,
    DEFAULT_HOST,
    DEFAULT_PORT,
    TEMPLATE_SUFFIX,
)
from src.domain.errors import ErrorCodes, GatewayToolError

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"


@dataclass
class TemplatizeConfig:
    """템플릿화 설정."""
    suffix: str = TEMPLATE_SUFFIX
    encoding: str = DEFAULT_ENCODING


@dataclass
class ServerConfig:
    """proxy 테스트 서버 설정."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def load_config(config_path: Path | None = None) -> dict:
    """
    설정 파일 로드.

    Raises:
        GatewayToolError: 최상위가 mapping 이 아님
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise GatewayToolError(
            ErrorCodes.INVALID_CONFIG,
            key="<root>",
            value=data,
            path=str(config_path),
        )
    return data


def _get_section(config: dict, key: str) -> dict:
    """설정 dict 에서 섹션 하나 조회 (없으면 빈 dict)."""
    if not isinstance(config, dict):
        raise GatewayToolError(ErrorCodes.INVALID_CONFIG, key="<root>", value=config)

    section = config.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise GatewayToolError(ErrorCodes.INVALID_CONFIG, key=key, value=section)
    return section


def load_templatize_config(config: dict) -> TemplatizeConfig:
    """설정 dict의 templatize 섹션 → TemplatizeConfig."""
    section = _get_section(config, "templatize")

    suffix = section.get("suffix", TEMPLATE_SUFFIX)
    if not isinstance(suffix, str) or not suffix:
        raise GatewayToolError(
            ErrorCodes.INVALID_CONFIG,
            key="templatize.suffix",
            value=suffix,
        )

    encoding = section.get("encoding", DEFAULT_ENCODING)
    try:
        if not isinstance(encoding, str) or not encoding:
            raise LookupError(encoding)
        codecs.lookup(encoding)
    except LookupError as e:
        raise GatewayToolError(
            ErrorCodes.INVALID_CONFIG,
            key="templatize.encoding",
            value=encoding,
        ) from e

    return TemplatizeConfig(suffix=suffix, encoding=encoding)


def load_server_config(config: dict) -> ServerConfig:
    """설정 dict의 server 섹션 → ServerConfig."""
    section = _get_section(config, "server")

    host = section.get("host", DEFAULT_HOST)
    if not isinstance(host, str) or not host:
        raise GatewayToolError(
            ErrorCodes.INVALID_CONFIG,
            key="server.host",
            value=host,
        )

    port = section.get("port", DEFAULT_PORT)
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise GatewayToolError(
            ErrorCodes.INVALID_CONFIG,
            key="server.port",
            value=port,
        )

    return ServerConfig(host=host, port=port)
