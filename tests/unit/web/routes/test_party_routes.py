"""
거래처 API 테스트
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from web.app import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    """lifespan을 실행하는 TestClient"""
    with TestClient(app) as test_client:
        yield test_client


class TestPartyRoutes:
    """/api/parties 테스트"""

    def test_list(self, client: TestClient) -> None:
        """거래처 목록"""
        response = client.get("/api/parties")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["abc-co", "xyz-traders", "prime-industries"]

    def test_get(self, client: TestClient) -> None:
        """거래처 조회"""
        response = client.get("/api/parties/prime-industries")

        assert response.status_code == 200
        assert response.json()["name"] == "Prime Industries Pvt Ltd"

    def test_get_not_found(self, client: TestClient) -> None:
        """없는 거래처 → 404"""
        response = client.get("/api/parties/ghost")

        assert response.status_code == 404
        assert response.json() == {"error": "Party not found"}

    def test_ledger(self, client: TestClient) -> None:
        """원장 미리보기"""
        response = client.get("/api/parties/abc-co/ledger")

        assert response.status_code == 200
        data = response.json()
        assert [e["balance"] for e in data["entries"]] == ["152000", "0"]
        assert [e["reference"] for e in data["entries"]] == ["SA/24-0001", "RC/24-0009"]

    def test_ledger_unknown_party(self, client: TestClient) -> None:
        """없는 거래처 원장 → 빈 목록"""
        response = client.get("/api/parties/ghost/ledger")

        assert response.status_code == 200
        assert response.json()["entries"] == []
