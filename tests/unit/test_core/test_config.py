"""
test_config.py - 설정 로드 테스트
"""

from pathlib import Path

import pytest

from src.core.config import (
    load_config,
    load_server_config,
    load_templatize_config,
)
from src.domain.errors import ErrorCodes, GatewayToolError


class TestLoadConfig:
    """load_config 함수 테스트."""

    def test_missing_file_returns_empty(self, tmp_path: Path):
        """파일 없음 → 빈 dict."""
        assert load_config(tmp_path / "none.yaml") == {}

    def test_empty_file_returns_empty(self, tmp_path: Path):
        """빈 파일 → 빈 dict."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_default_yaml(self, default_config_path: Path, default_config: dict):
        """프로젝트 default.yaml 로드."""
        assert load_config(default_config_path) == default_config
        assert default_config["templatize"]["suffix"] == ".template"


class TestLoadTemplatizeConfig:
    """load_templatize_config 함수 테스트."""

    def test_defaults(self):
        """섹션 없음 → 기본값."""
        config = load_templatize_config({})

        assert config.suffix == ".template"
        assert config.encoding == "utf-8"

    def test_values_from_section(self):
        """섹션 값 사용."""
        config = load_templatize_config(
            {"templatize": {"suffix": ".tmpl", "encoding": "latin-1"}}
        )

        assert config.suffix == ".tmpl"
        assert config.encoding == "latin-1"

    @pytest.mark.parametrize("suffix", ["", None, 3])
    def test_invalid_suffix(self, suffix):
        """빈/비문자열 suffix → INVALID_CONFIG."""
        with pytest.raises(GatewayToolError) as exc_info:
            load_templatize_config({"templatize": {"suffix": suffix}})

        assert exc_info.value.code == ErrorCodes.INVALID_CONFIG
        assert exc_info.value.to_dict()["key"] == "templatize.suffix"


class TestLoadServerConfig:
    """load_server_config 함수 테스트."""

    def test_defaults(self):
        """섹션 없음 → 127.0.0.1:5000."""
        config = load_server_config({})

        assert config.host == "127.0.0.1"
        assert config.port == 5000

    def test_invalid_port(self):
        """범위 밖 port → INVALID_CONFIG."""
        with pytest.raises(GatewayToolError):
            load_server_config({"server": {"port": 70000}})

    @pytest.mark.parametrize("port", [0, "5000", True])
    def test_invalid_port_types(self, port):
        """0, 문자열, bool → INVALID_CONFIG."""
        with pytest.raises(GatewayToolError) as exc_info:
            load_server_config({"server": {"port": port}})

        assert exc_info.value.to_dict()["key"] == "server.port"

    @pytest.mark.parametrize("host", ["", 127, ["localhost"]])
    def test_invalid_host(self, host):
        """빈/비문자열 host → INVALID_CONFIG."""
        with pytest.raises(GatewayToolError) as exc_info:
            load_server_config({"server": {"host": host}})

        assert exc_info.value.to_dict()["key"] == "server.host"


# =============================================================================
# 섹션/최상위 형태 검증
# =============================================================================

class TestConfigShape:
    """mapping 이 아닌 설정 → INVALID_CONFIG."""

    @pytest.mark.parametrize(
        ("loader", "key"),
        [
            (load_templatize_config, "templatize"),
            (load_server_config, "server"),
        ],
    )
    @pytest.mark.parametrize("section", [".tmpl", ["a", "b"], 5, ""])
    def test_section_not_mapping(self, loader, key, section):
        """섹션이 dict 가 아니면 AttributeError 대신 INVALID_CONFIG."""
        with pytest.raises(GatewayToolError) as exc_info:
            loader({key: section})

        assert exc_info.value.code == ErrorCodes.INVALID_CONFIG
        assert exc_info.value.to_dict()["key"] == key

    @pytest.mark.parametrize("loader", [load_templatize_config, load_server_config])
    @pytest.mark.parametrize("config", [["templatize"], "text", 3])
    def test_root_not_mapping(self, loader, config):
        """최상위가 dict 가 아님."""
        with pytest.raises(GatewayToolError) as exc_info:
            loader(config)

        assert exc_info.value.to_dict()["key"] == "<root>"

    def test_null_section_uses_defaults(self):
        """`templatize:` (값 없음) → 기본값."""
        assert load_templatize_config({"templatize": None}).suffix == ".template"

    @pytest.mark.parametrize("content", ["- a\n- b\n", "just text\n", "42\n"])
    def test_load_config_root_not_mapping(self, tmp_path: Path, content: str):
        """YAML 최상위가 list/scalar → INVALID_CONFIG."""
        path = tmp_path / "bad.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(GatewayToolError) as exc_info:
            load_config(path)

        assert exc_info.value.to_dict()["key"] == "<root>"
        assert exc_info.value.to_dict()["path"] == str(path)


class TestEncodingValidation:
    """templatize.encoding 검증."""

    @pytest.mark.parametrize("encoding", ["no-such-codec", "", None, 8])
    def test_invalid_encoding(self, encoding):
        """codecs.lookup 실패/비문자열 → INVALID_CONFIG."""
        with pytest.raises(GatewayToolError) as exc_info:
            load_templatize_config({"templatize": {"encoding": encoding}})

        assert exc_info.value.to_dict()["key"] == "templatize.encoding"

    @pytest.mark.parametrize("encoding", ["utf-8", "UTF8", "cp949", "latin-1"])
    def test_known_encoding(self, encoding):
        """알려진 codec 은 그대로 보존."""
        assert load_templatize_config({"templatize": {"encoding": encoding}}).encoding == encoding
