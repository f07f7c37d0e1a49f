"""
Templates layer: admin index 템플릿화 모듈.

역할:
- environment meta 태그 → 템플릿 블록 치환 (templatize.py)
"""

from .templatize import (
    META_PATTERN,
    TemplatizeResult,
    quote_literal,
    render_meta_block,
    template_path_for,
    templatize_file,
    templatize_text,
)

__all__ = [
    "META_PATTERN",
    "TemplatizeResult",
    "quote_literal",
    "render_meta_block",
    "template_path_for",
    "templatize_text",
    "templatize_file",
]
