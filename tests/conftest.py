"""
Pytest fixtures for the gateway admin tooling tests.
"""

from pathlib import Path

import pytest
import yaml

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# HTML Fixtures
# =============================================================================

@pytest.fixture
def admin_index_html() -> str:
    """environment meta 태그 1개를 가진 admin index.html."""
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <head>\n"
        '    <meta charset="utf-8" />\n'
        '    <meta name="gateway/config/environment" content="%7B%22modulePrefix%22%3A%22gateway%22%7D" />\n'
        "  </head>\n"
        "  <body></body>\n"
        "</html>\n"
    )


@pytest.fixture
def admin_index(tmp_path: Path, admin_index_html: str) -> Path:
    """tmp_path 에 기록된 admin index.html."""
    path = tmp_path / "index.html"
    path.write_text(admin_index_html, encoding="utf-8")
    return path
