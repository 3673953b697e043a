"""
원장 명세서 API 테스트

POST /api/send-email 상태 코드 및 응답 본문
"""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from adapters.interfaces import IMailer
from adapters.mock.mailer import MockMailer
from core.config.loader import INCOMPLETE_SMTP_MESSAGE, ConfigurationError
from core.constants import Defaults, EnvVars
from web.app import app
from web.dependencies import get_mailer_factory


VALID_PAYLOAD = {
    "partyId": "abc-co",
    "email": "accounts@abccompany.com",
    "subject": "Tax Invoice & Ledger Statement",
    "body": "Dear Sir/Madam,",
}


@pytest.fixture
def output_dir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """LEDGER_OUTPUT_DIR을 임시 디렉토리로 지정"""
    path = temp_dir / "generated-ledgers"
    monkeypatch.setenv(EnvVars.OUTPUT_DIR, str(path))
    return path


@pytest.fixture
def client(output_dir: Path, mock_mailer: MockMailer) -> Iterator[TestClient]:
    """Mock Mailer를 주입한 TestClient"""
    app.dependency_overrides[get_mailer_factory] = lambda: (lambda: mock_mailer)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestSendEmail:
    """POST /api/send-email 테스트"""

    def test_success(self, client: TestClient, output_dir: Path, mock_mailer: MockMailer) -> None:
        """200 + filePath"""
        response = client.post("/api/send-email", json=VALID_PAYLOAD)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Email sent successfully with Ledger attachment!"
        assert data["filePath"] == str(output_dir / "Ledger_ABC_Company_Ltd.pdf")
        assert (output_dir / "Ledger_ABC_Company_Ltd.pdf").exists()
        assert len(mock_mailer.sent) == 1

    def test_missing_field(self, client: TestClient, output_dir: Path) -> None:
        """필수 필드 누락 → 400 {error}"""
        payload = {k: v for k, v in VALID_PAYLOAD.items() if k != "subject"}

        response = client.post("/api/send-email", json=payload)

        assert response.status_code == 400
        assert set(response.json()) == {"error"}
        assert not output_dir.exists()

    def test_malformed_json(self, client: TestClient) -> None:
        """JSON 파싱 실패 → 400"""
        response = client.post(
            "/api/send-email",
            content=b"{oops",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON payload"}

    def test_unknown_party(self, client: TestClient, output_dir: Path) -> None:
        """없는 거래처 → 400"""
        response = client.post("/api/send-email", json={**VALID_PAYLOAD, "partyId": "ghost"})

        assert response.status_code == 400
        assert response.json() == {"error": "Please select a Party Ledger"}
        assert not output_dir.exists()

    def test_subject_with_line_break(self, client: TestClient, output_dir: Path) -> None:
        """줄바꿈 포함 제목 → 400, 파일 없음"""
        response = client.post(
            "/api/send-email",
            json={**VALID_PAYLOAD, "subject": "Ledger\nStatement"},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("subject")
        assert not output_dir.exists()

    def test_delivery_failure(self, output_dir: Path) -> None:
        """발송 실패 → 500, 파일 유지"""
        failing = MockMailer(should_fail=True, error_message="Connection refused")
        app.dependency_overrides[get_mailer_factory] = lambda: (lambda: failing)
        try:
            with TestClient(app) as client:
                response = client.post("/api/send-email", json=VALID_PAYLOAD)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Connection refused"}
        assert (output_dir / "Ledger_ABC_Company_Ltd.pdf").exists()

    def test_configuration_error(self, output_dir: Path) -> None:
        """SMTP 설정 누락 → 500"""

        def broken() -> IMailer:
            raise ConfigurationError(INCOMPLETE_SMTP_MESSAGE)

        app.dependency_overrides[get_mailer_factory] = lambda: broken
        try:
            with TestClient(app) as client:
                response = client.post("/api/send-email", json=VALID_PAYLOAD)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": INCOMPLETE_SMTP_MESSAGE}


class TestDefaults:
    """조회용 엔드포인트 테스트"""

    def test_email_defaults(self, client: TestClient) -> None:
        """메일 작성 기본값"""
        response = client.get("/api/email/defaults")

        assert response.status_code == 200
        assert response.json() == {"subject": Defaults.EMAIL_SUBJECT, "body": Defaults.EMAIL_BODY}

    def test_financial_year(self, client: TestClient) -> None:
        """현재 회계연도"""
        response = client.get("/api/financial-year")

        assert response.status_code == 200
        data = response.json()
        start_year = int(data["label"].split("-")[0])
        assert data["start"].startswith(f"{start_year}-04-01")

    def test_health(self, client: TestClient) -> None:
        """헬스 체크"""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": Defaults.VERSION}
