"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


class MailSendError(Exception):
    """메일 발송 실패 예외"""

    pass


@runtime_checkable
class IMailer(Protocol):
    """메일 발송 인터페이스

    첨부 파일이 있는 텍스트 메일을 발송.
    실패 시 예외 발생 (반환값 없음).
    """

    async def send(
        self,
        recipient: str,
        subject: str,
        body: str,
        attachments: Sequence[Path] = (),
    ) -> None:
        """메일 발송

        Args:
            recipient: 수신자 이메일
            subject: 제목
            body: 본문 (plain text)
            attachments: 첨부 파일 경로 목록

        Raises:
            MailSendError: 발송 실패 시
        """
        ...
