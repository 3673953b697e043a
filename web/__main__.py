"""
Web 진입점

실행 방법:
    python -m web

SMTP 설정은 환경 변수(SMTP_HOST, SMTP_PORT, SMTP_USER, SMTP_PASS) 또는
config/secrets.yaml의 smtp 섹션에서 로드.
"""

import uvicorn

from core.constants import Defaults

if __name__ == "__main__":
    uvicorn.run(
        "web.app:app",
        host=Defaults.WEB_HOST,
        port=Defaults.WEB_PORT,
        reload=False,
        log_config=None,  # core.logging 루트 핸들러 사용
    )
