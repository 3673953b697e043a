"""
Mock 메일 발송

테스트용 Mock Mailer.
IMailer Protocol 준수.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from adapters.interfaces import MailSendError


@dataclass
class SentMailRecord:
    """발송 기록"""

    recipient: str
    subject: str
    body: str
    attachments: list[Path]
    timestamp: datetime


class MockMailer:
    """Mock 메일 발송

    IMailer Protocol 구현.
    발송된 모든 메일을 기록하여 테스트에서 검증 가능.

    사용 예시:
    ```python
    mailer = MockMailer()

    await mailer.send("a@example.com", "제목", "본문", [pdf_path])

    assert len(mailer.sent) == 1
    assert mailer.sent[0].attachments == [pdf_path]
    ```
    """

    def __init__(self, should_fail: bool = False, error_message: str = "Mock SMTP failure"):
        """
        Args:
            should_fail: True면 모든 발송 실패 (에러 시나리오 테스트용)
            error_message: 실패 시 예외 메시지
        """
        self.should_fail = should_fail
        self.error_message = error_message
        self.sent: list[SentMailRecord] = []

    async def send(
        self,
        recipient: str,
        subject: str,
        body: str,
        attachments: Sequence[Path] = (),
    ) -> None:
        """메일 발송 (기록만)"""
        if self.should_fail:
            raise MailSendError(self.error_message)

        self.sent.append(
            SentMailRecord(
                recipient=recipient,
                subject=subject,
                body=body,
                attachments=list(attachments),
                timestamp=datetime.now(timezone.utc),
            )
        )

    def clear(self) -> None:
        """기록 초기화"""
        self.sent.clear()
