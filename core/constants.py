"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → ledger-mailer/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    APP_NAME: str = "Ledger Mailer"
    VERSION: str = "1.0.0"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # 명세서 표시 (en_IN / INR)
    LOCALE: str = "en_IN"
    CURRENCY: str = "INR"

    # SMTP
    SMTP_TIMEOUT_SEC: float = 60.0  # aiosmtplib 기본값과 동일
    SMTP_IMPLICIT_TLS_PORT: int = 465
    FALLBACK_SENDER: str = "no-reply@example.com"

    # 메일 작성 기본값
    EMAIL_SUBJECT: str = "Tax Invoice & Ledger Statement"
    EMAIL_BODY: str = (
        "Dear Sir/Madam,\n"
        "\n"
        "Please find attached:\n"
        "1) Tax Invoice\n"
        "2) Ledger Statement\n"
        "\n"
        "Regards,\n"
        "Your Company Name"
    )


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"

    # 명세서 출력 디렉토리 이름 (프로세스 작업 디렉토리 기준)
    OUTPUT_DIR_NAME: str = "generated-ledgers"


class EnvVars:
    """환경 변수 이름"""

    SMTP_HOST: str = "SMTP_HOST"
    SMTP_PORT: str = "SMTP_PORT"
    SMTP_USER: str = "SMTP_USER"
    SMTP_PASS: str = "SMTP_PASS"
    SMTP_FROM: str = "SMTP_FROM"

    OUTPUT_DIR: str = "LEDGER_OUTPUT_DIR"
    LOCALE: str = "STATEMENT_LOCALE"
    CURRENCY: str = "STATEMENT_CURRENCY"
