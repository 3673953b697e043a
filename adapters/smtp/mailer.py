"""
SMTP 메일 발송

aiosmtplib로 첨부 파일 메일 전송.
IMailer Protocol 준수.
"""

import asyncio
import logging
import mimetypes
from collections.abc import Sequence
from email.message import EmailMessage
from pathlib import Path

import aiosmtplib

from adapters.interfaces import MailSendError
from core.config.loader import MailConfig
from core.constants import Defaults

logger = logging.getLogger(__name__)


class SmtpMailer:
    """SMTP 메일 발송

    IMailer Protocol 구현.
    465 포트는 암묵적 TLS, 그 외 포트는 서버가 지원하면 STARTTLS.

    사용 예시:
    ```python
    mailer = SmtpMailer(
        host="smtp.example.com",
        port=587,
        username="mailer@example.com",
        password="secret",
        from_address="accounts@example.com",
    )

    await mailer.send(
        recipient="finance@xyztraders.in",
        subject="Ledger Statement",
        body="Please find attached.",
        attachments=[Path("generated-ledgers/Ledger_XYZ_Traders.pdf")],
    )
    ```
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_address: str,
        timeout: float = Defaults.SMTP_TIMEOUT_SEC,
    ):
        """
        Args:
            host: SMTP 호스트
            port: SMTP 포트
            username: 인증 사용자
            password: 인증 비밀번호
            from_address: 발신 주소
            timeout: 연결/응답 타임아웃 (초)
        """
        if not host:
            raise ValueError("host는 필수입니다")

        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_address = from_address
        self.timeout = timeout

    @property
    def use_tls(self) -> bool:
        """암묵적 TLS 여부"""
        return self.port == Defaults.SMTP_IMPLICIT_TLS_PORT

    def build_message(
        self,
        recipient: str,
        subject: str,
        body: str,
        attachments: Sequence[Path] = (),
    ) -> EmailMessage:
        """발송 메시지 구성 (첨부 파일은 디스크에서 읽음)"""
        message = EmailMessage()
        message["From"] = self.from_address
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(body)

        for path in attachments:
            content_type, _ = mimetypes.guess_type(path.name)
            maintype, subtype = (content_type or "application/octet-stream").split("/", 1)
            message.add_attachment(
                path.read_bytes(),
                maintype=maintype,
                subtype=subtype,
                filename=path.name,
            )

        return message

    async def send(
        self,
        recipient: str,
        subject: str,
        body: str,
        attachments: Sequence[Path] = (),
    ) -> None:
        """메일 발송

        Raises:
            MailSendError: SMTP 연결/인증/발송 실패
        """
        message = await asyncio.to_thread(self.build_message, recipient, subject, body, attachments)

        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls,
                start_tls=False if self.use_tls else None,
                timeout=self.timeout,
            )
        except aiosmtplib.SMTPException as e:
            logger.error(f"SMTP 발송 실패: {self.host}:{self.port} → {recipient}: {e}")
            raise MailSendError(f"Failed to send email: {e}") from e

        logger.info(f"메일 발송 완료: {recipient} (첨부 {len(attachments)}건)")


def create_mailer(config: MailConfig) -> SmtpMailer:
    """MailConfig로 SmtpMailer 생성"""
    return SmtpMailer(
        host=config.host,
        port=config.port,
        username=config.username,
        password=config.password,
        from_address=config.from_address,
        timeout=config.timeout,
    )
