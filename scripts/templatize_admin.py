#!/usr/bin/env python3
"""
templatize_admin.py - admin index.html 의 environment meta 태그 템플릿화

<meta name="gateway/config/environment" content="VALUE" /> 를 찾아:
1. {{version}} placeholder 삽입
2. content 를 {{replacePath "VALUE"}} 로 감싼 meta 태그로 재출력

결과는 <입력 경로>.template 에 기록 (원본 불변).

사용법:
    uv run python scripts/templatize_admin.py admin/dist/index.html

    # suffix 변경
    uv run python scripts/templatize_admin.py index.html --suffix .tmpl
"""

import argparse
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.config import DEFAULT_CONFIG_PATH, load_config, load_templatize_config
from src.templates.templatize import templatize_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="environment meta 태그 템플릿화 스크립트",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "path",
        type=Path,
        help="템플릿화할 HTML 파일 경로",
    )
    parser.add_argument(
        "--suffix",
        type=str,
        default=None,
        help="출력 파일 suffix (기본: 설정값, .template)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="설정 파일 경로 (기본: default.yaml)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="경고 이상만 출력",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # 로깅 설정
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = load_templatize_config(load_config(args.config))
    suffix = args.suffix if args.suffix is not None else config.suffix

    # 읽기 실패(OSError)는 그대로 전파 → traceback + non-zero 종료
    result = templatize_file(args.path, suffix=suffix, encoding=config.encoding)

    if result.replacements == 0:
        logger.warning(f"meta 태그 없음, 원본 그대로 기록: {result.output_path}")
    else:
        logger.info(f"meta 태그 {result.replacements}개 치환 → {result.output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
