"""
App layer: proxy 테스트 하네스 서버 (FastAPI).

역할:
- 등록된 proxy 핸들러(echo 등)를 HTTP route로 노출
- ⚠️ 핸들러 로직 없음 (src/proxy에 위임)
"""
