"""
Admin index 템플릿화: environment meta 태그 → 템플릿 블록.

동작:
- <meta name="gateway/config/environment" content="VALUE" /> 를 모두 찾아
- {{version}} placeholder + replacePath 로 감싼 meta 태그 블록으로 치환
- 결과는 <원본 경로>.template 에 기록, 원본은 불변

⚠️ 정확히 위 형태만 매칭 (속성 순서/공백/따옴표 변형은 치환하지 않음)
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from src.domain.constants import (
    DEFAULT_ENCODING,
    ENVIRONMENT_META_NAME,
    REPLACE_PATH_HELPER,
    TEMPLATE_SUFFIX,
    VERSION_PLACEHOLDER,
)
from src.domain.errors import ErrorCodes, GatewayToolError

logger = logging.getLogger(__name__)

# =============================================================================
# Patterns
# =============================================================================

META_PATTERN = re.compile(
    r'<meta name="(' + re.escape(ENVIRONMENT_META_NAME) + r')" content="([^"]*)" />'
)

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
    "\v": "\\v",
    "\b": "\\b",
    "\a": "\\a",
    "\x1b": "\\e",
}

# '#' 뒤에 오면 보간으로 해석되는 문자
_INTERPOLATION_STARTS = ("{", "$", "@")


# =============================================================================
# Types
# =============================================================================


@dataclass
class TemplatizeResult:
    """템플릿화 결과."""

    text: str
    replacements: int
    output_path: Path | None = None


# =============================================================================
# Rendering
# =============================================================================


def quote_literal(value: str) -> str:
    """
    값을 템플릿 helper 인자용 큰따옴표 문자열 리터럴로 변환.

    - 따옴표, 백슬래시, 제어문자는 escape
    - '#{', '#$', '#@' 는 '\\#' 로 escape
    - 비 ASCII 문자는 \\uXXXX (BMP 밖은 \\u{X...})

    Args:
        value: meta content 원문

    Returns:
        따옴표 포함 리터럴 (예: '"production"')
    """
    out = []
    for i, ch in enumerate(value):
        code = ord(ch)
        if ch in _SHORT_ESCAPES:
            out.append(_SHORT_ESCAPES[ch])
        elif ch == "#" and value[i + 1:i + 2] in _INTERPOLATION_STARTS:
            out.append("\\#")
        elif code < 0x20 or code == 0x7F:
            out.append(f"\\x{code:02X}")
        elif code < 0x80:
            out.append(ch)
        elif code <= 0xFFFF:
            out.append(f"\\u{code:04X}")
        else:
            out.append(f"\\u{{{code:X}}}")
    return '"' + "".join(out) + '"'


def render_meta_block(name: str, content: str) -> str:
    """
    매칭 1건에 대한 치환 블록 생성.

    Args:
        name: meta name 속성값
        content: meta content 속성값 (원문)

    Returns:
        version placeholder + 템플릿화된 meta 태그 (여러 줄)
    """
    templated = "{{" + f"{REPLACE_PATH_HELPER} {quote_literal(content)}" + "}}"
    return (
        f"    {VERSION_PLACEHOLDER}\n"
        "  \n"
        f'    <meta name="{name}" content="{templated}" />\n'
    )


def templatize_text(text: str) -> TemplatizeResult:
    """
    텍스트 내 모든 environment meta 태그 치환.

    매칭이 없으면 입력 그대로 반환.
    """
    rewritten, count = META_PATTERN.subn(
        lambda m: render_meta_block(m.group(1), m.group(2)),
        text,
    )
    logger.debug(f"meta 태그 {count}개 치환")
    return TemplatizeResult(text=rewritten, replacements=count)


# =============================================================================
# File I/O
# =============================================================================


def template_path_for(path: Path, suffix: str = TEMPLATE_SUFFIX) -> Path:
    """
    출력 경로: 원본 파일명 뒤에 suffix를 붙인 형제 경로.

    Raises:
        GatewayToolError: suffix가 비어 있음 (출력 == 원본 → 원본 덮어쓰기)
    """
    if not isinstance(suffix, str) or not suffix:
        raise GatewayToolError(
            ErrorCodes.INVALID_CONFIG,
            key="templatize.suffix",
            value=suffix,
        )
    path = Path(path)
    return path.with_name(path.name + suffix)


def templatize_file(
    path: Path,
    suffix: str = TEMPLATE_SUFFIX,
    encoding: str = DEFAULT_ENCODING,
) -> TemplatizeResult:
    """
    파일을 읽어 템플릿화 후 <path><suffix> 로 저장.

    Args:
        path: 원본 HTML 파일 경로
        suffix: 출력 파일 suffix
        encoding: 읽기/쓰기 인코딩

    Returns:
        TemplatizeResult (output_path 포함)

    Raises:
        GatewayToolError: suffix가 비어 있음 (읽기 전에 검사)
        OSError: 원본 파일이 없거나 읽을 수 없음 (그대로 전파)
    """
    path = Path(path)
    output_path = template_path_for(path, suffix)

    # newline="" → 원본 줄바꿈 보존
    with open(path, encoding=encoding, newline="") as f:
        source = f.read()

    result = templatize_text(source)

    with open(output_path, "w", encoding=encoding, newline="") as f:
        f.write(result.text)

    result.output_path = output_path
    return result
