"""
Mock Mailer 테스트

발송 기록 및 실패 모드
"""

from pathlib import Path

import pytest

from adapters.interfaces import IMailer, MailSendError
from adapters.mock.mailer import MockMailer


class TestMockMailer:
    """MockMailer 테스트"""

    def test_implements_imailer_protocol(self) -> None:
        """IMailer Protocol 구현 확인"""
        assert isinstance(MockMailer(), IMailer)

    @pytest.mark.asyncio
    async def test_records_sent_mail(self) -> None:
        """발송 기록"""
        mailer = MockMailer()
        attachment = Path("Ledger_XYZ_Traders.pdf")

        await mailer.send("finance@xyztraders.in", "제목", "본문", [attachment])

        assert len(mailer.sent) == 1
        record = mailer.sent[0]
        assert record.recipient == "finance@xyztraders.in"
        assert record.subject == "제목"
        assert record.attachments == [attachment]

    @pytest.mark.asyncio
    async def test_should_fail(self) -> None:
        """실패 모드"""
        mailer = MockMailer(should_fail=True, error_message="relay denied")

        with pytest.raises(MailSendError, match="relay denied"):
            await mailer.send("a@example.com", "s", "b")

        assert mailer.sent == []

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        """기록 초기화"""
        mailer = MockMailer()
        await mailer.send("a@example.com", "s", "b")

        mailer.clear()

        assert mailer.sent == []
