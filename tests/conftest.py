"""
pytest 공통 fixture 정의

원장 저장소, 회계연도, Mock Mailer, 임시 설정 파일 등
"""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from adapters.mock.mailer import MockMailer
from core.config.loader import Settings
from core.ledger.financial_year import compute_financial_year
from core.ledger.store import LedgerStore, build_ledger_store
from core.ledger.types import FinancialYear


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings() -> None:
    """Settings 싱글턴 초기화 (테스트 간 격리)"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def ledger_store() -> LedgerStore:
    """시드 데이터 LedgerStore"""
    return build_ledger_store()


@pytest.fixture
def financial_year() -> FinancialYear:
    """고정 기준일(2024-06-01) 회계연도"""
    return compute_financial_year(datetime(2024, 6, 1, 9, 30))


@pytest.fixture
def mock_mailer() -> MockMailer:
    """발송 기록용 Mock Mailer"""
    return MockMailer()


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성"""
    secrets_content = """# 테스트용 secrets.yaml
smtp:
  host: "smtp.example.com"
  port: 587
  username: "mailer@example.com"
  password: "yaml_password"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_incomplete(temp_dir: Path) -> Path:
    """password가 없는 secrets.yaml 파일 생성"""
    secrets_content = """smtp:
  host: "smtp.example.com"
  port: 465
  username: "mailer@example.com"
"""
    secrets_path = temp_dir / "secrets_incomplete.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path
