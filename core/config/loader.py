"""
설정 로더

SMTP 설정 (환경 변수 + secrets.yaml) 및 명세서 설정 로드
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from babel import Locale, UnknownLocaleError
from babel.numbers import UnknownCurrencyError, validate_currency

from core.constants import Defaults, EnvVars, Paths


@dataclass(frozen=True)
class MailConfig:
    """SMTP 발송 설정

    불변 데이터 구조로 설정 변경 방지
    """

    host: str
    port: int
    username: str
    password: str
    from_address: str
    timeout: float = Defaults.SMTP_TIMEOUT_SEC

    @property
    def use_tls(self) -> bool:
        """암묵적 TLS 여부 (465 포트)"""
        return self.port == Defaults.SMTP_IMPLICIT_TLS_PORT


@dataclass(frozen=True)
class StatementConfig:
    """명세서 생성 설정"""

    output_dir: Path
    locale: str
    currency: str


class ConfigurationError(Exception):
    """설정 누락/오류 예외 (운영자 설정 문제)"""

    pass


INCOMPLETE_SMTP_MESSAGE = (
    "SMTP configuration is incomplete. "
    "Ensure SMTP_HOST, SMTP_PORT, SMTP_USER, SMTP_PASS are set."
)


def _load_yaml_section(path: Path, section: str) -> dict[str, Any]:
    """secrets.yaml의 특정 섹션 로드 (파일이 없으면 빈 dict)"""
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("secrets.yaml 최상위는 매핑이어야 합니다")

    value = data.get(section) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"secrets.yaml의 '{section}' 섹션은 매핑이어야 합니다")
    return value


def load_mail_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> MailConfig:
    """SMTP 설정 로드

    secrets.yaml의 smtp 섹션을 읽고, 환경 변수가 있으면 우선 적용.

    secrets.yaml 예시:
        smtp:
          host: smtp.example.com
          port: 587
          username: mailer@example.com
          password: secret
          from_address: accounts@example.com

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)
        environ: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        MailConfig 인스턴스

    Raises:
        ConfigurationError: host/port/username/password 누락 또는 port 형식 오류
    """
    if path is None:
        path = Paths.SECRETS_FILE
    if environ is None:
        environ = os.environ

    section = _load_yaml_section(path, "smtp")

    def pick(env_key: str, yaml_key: str) -> str:
        value = environ.get(env_key)
        if value:
            return value
        yaml_value = section.get(yaml_key)
        return str(yaml_value) if yaml_value not in (None, "") else ""

    host = pick(EnvVars.SMTP_HOST, "host")
    port_raw = pick(EnvVars.SMTP_PORT, "port")
    username = pick(EnvVars.SMTP_USER, "username")
    password = pick(EnvVars.SMTP_PASS, "password")

    if not host or not port_raw or not username or not password:
        raise ConfigurationError(INCOMPLETE_SMTP_MESSAGE)

    try:
        port = int(port_raw)
    except ValueError as e:
        raise ConfigurationError(f"SMTP_PORT must be an integer, got '{port_raw}'") from e

    if not 0 < port < 65536:
        raise ConfigurationError(f"SMTP_PORT out of range: {port}")

    from_address = pick(EnvVars.SMTP_FROM, "from_address") or username or Defaults.FALLBACK_SENDER

    return MailConfig(
        host=host,
        port=port,
        username=username,
        password=password,
        from_address=from_address,
    )


def load_statement_config(environ: Mapping[str, str] | None = None) -> StatementConfig:
    """명세서 설정 로드

    출력 디렉토리는 프로세스 작업 디렉토리 기준.

    Args:
        environ: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        StatementConfig 인스턴스

    Raises:
        ConfigurationError: Babel이 모르는 로케일/통화 코드
    """
    if environ is None:
        environ = os.environ

    output_dir_raw = environ.get(EnvVars.OUTPUT_DIR)
    if output_dir_raw:
        output_dir = Path(output_dir_raw)
    else:
        output_dir = Path.cwd() / Paths.OUTPUT_DIR_NAME

    locale = environ.get(EnvVars.LOCALE) or Defaults.LOCALE
    try:
        Locale.parse(locale)
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigurationError(f"{EnvVars.LOCALE} is not a valid locale: {locale}") from e

    currency = (environ.get(EnvVars.CURRENCY) or Defaults.CURRENCY).upper()
    try:
        validate_currency(currency)
    except UnknownCurrencyError as e:
        raise ConfigurationError(f"{EnvVars.CURRENCY} is not a valid currency code: {currency}") from e

    return StatementConfig(
        output_dir=output_dir,
        locale=locale,
        currency=currency,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    명세서 설정은 최초 생성 시 고정.
    SMTP 설정은 발송 시점마다 로드 (설정 누락을 발송 단계에서 즉시 보고).
    """

    _instance: "Settings | None" = None
    _statement: StatementConfig | None = None
    _secrets_path: Path | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._statement is None:
            self._statement = load_statement_config()
            self._secrets_path = secrets_path

    @property
    def statement(self) -> StatementConfig:
        """명세서 설정"""
        assert self._statement is not None
        return self._statement

    @property
    def output_dir(self) -> Path:
        """명세서 PDF 출력 디렉토리"""
        return self.statement.output_dir

    @property
    def locale(self) -> str:
        """표시 로케일"""
        return self.statement.locale

    @property
    def currency(self) -> str:
        """통화 코드"""
        return self.statement.currency

    def load_mail_config(self) -> MailConfig:
        """SMTP 설정 로드

        Raises:
            ConfigurationError: 설정 누락 시
        """
        return load_mail_config(self._secrets_path)

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._statement = None
        cls._secrets_path = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
