"""
Domain Constants: 도구 전역 상수.

meta 태그 이름, 템플릿 토큰, 출력 파일명 정책 등.
"""

# =============================================================================
# Meta Tag (치환 대상)
# =============================================================================
# admin index.html 에 들어있는 환경 설정 마커:
#   <meta name="gateway/config/environment" content="..." />

ENVIRONMENT_META_NAME = "gateway/config/environment"

# =============================================================================
# Template Tokens (후속 템플릿 단계가 치환)
# =============================================================================

VERSION_PLACEHOLDER = "{{version}}"
REPLACE_PATH_HELPER = "replacePath"

# =============================================================================
# Output Filenames (출력 파일명 정책)
# =============================================================================
# 원본 옆에 <원본 경로>.template 로 기록, 원본은 건드리지 않음

TEMPLATE_SUFFIX = ".template"
DEFAULT_ENCODING = "utf-8"

# =============================================================================
# Proxy Test Harness
# =============================================================================

ECHO_ROUTE = "echo"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000
