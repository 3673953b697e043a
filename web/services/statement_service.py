"""
원장 명세서 발송 서비스

요청 검증 → 거래처 조회 → PDF 생성 → 파일 저장 → 메일 발송.
각 단계는 순차 실행되며 첫 실패에서 종료 (재시도/롤백 없음).
PDF 생성과 파일 저장은 작업 스레드에서 실행 (이벤트 루프 비차단).

동일 거래처에 대한 동시 요청은 같은 파일에 쓰며 마지막 쓰기가 남음 (잠금 없음).
"""

import asyncio
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from pydantic import ValidationError

from adapters.interfaces import IMailer
from core.config.loader import ConfigurationError
from core.ledger.store import LedgerStore
from core.ledger.types import FinancialYear, Party
from core.statement.formatting import statement_file_name
from core.statement.renderer import StatementRenderer
from core.types import DeliveryOutcome
from web.models.requests import SendEmailRequest, first_error_message

logger = logging.getLogger(__name__)


SUCCESS_MESSAGE = "Email sent successfully with Ledger attachment!"
PARTY_NOT_SELECTED_MESSAGE = "Please select a Party Ledger"

# 설정 누락 시 ConfigurationError 발생
MailerFactory = Callable[[], IMailer]


# =========================================================================
# 단계별 예외
# =========================================================================


class StatementDeliveryError(Exception):
    """명세서 발송 파이프라인 오류"""

    outcome: ClassVar[DeliveryOutcome] = DeliveryOutcome.DELIVERY_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PayloadValidationError(StatementDeliveryError):
    """요청 검증 실패"""

    outcome = DeliveryOutcome.VALIDATION_ERROR


class PartyNotFoundError(StatementDeliveryError):
    """거래처 없음"""

    outcome = DeliveryOutcome.PARTY_NOT_FOUND


class RenderError(StatementDeliveryError):
    """PDF 생성 실패"""

    outcome = DeliveryOutcome.RENDER_ERROR


class PersistError(StatementDeliveryError):
    """파일 저장 실패"""

    outcome = DeliveryOutcome.PERSIST_ERROR


class DeliveryError(StatementDeliveryError):
    """메일 발송 실패"""

    outcome = DeliveryOutcome.DELIVERY_ERROR


# =========================================================================
# 결과 (종료 상태별 데이터)
# =========================================================================


@dataclass(frozen=True)
class StatementSent:
    """발송 성공"""

    file_path: Path
    message: str = SUCCESS_MESSAGE

    outcome: ClassVar[DeliveryOutcome] = DeliveryOutcome.SENT

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "success": True,
            "message": self.message,
            "filePath": str(self.file_path),
        }


@dataclass(frozen=True)
class StatementFailed:
    """발송 실패 (종료 상태 + 메시지)"""

    outcome: DeliveryOutcome
    message: str

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리 변환"""
        return {"error": self.message}


DeliveryResult = StatementSent | StatementFailed


# =========================================================================
# 서비스
# =========================================================================


class StatementDeliveryService:
    """원장 명세서 발송 서비스

    Args:
        store: LedgerStore (읽기 전용)
        financial_year: 시작 시 계산된 회계연도
        output_dir: PDF 저장 디렉토리
        mailer_factory: IMailer 생성 함수 (설정 누락 시 ConfigurationError)
        renderer: 명세서 렌더러 (None이면 기본 설정)
    """

    def __init__(
        self,
        store: LedgerStore,
        financial_year: FinancialYear,
        output_dir: Path,
        mailer_factory: MailerFactory,
        renderer: StatementRenderer | None = None,
    ):
        self.store = store
        self.financial_year = financial_year
        self.output_dir = output_dir
        self.mailer_factory = mailer_factory
        self.renderer = renderer or StatementRenderer()

    async def deliver(self, payload: Any) -> DeliveryResult:
        """명세서 생성 및 메일 발송

        모든 오류는 여기서 한 번만 처리하여 StatementFailed로 변환.

        Args:
            payload: 요청 JSON (dict)

        Returns:
            StatementSent 또는 StatementFailed
        """
        try:
            request = self.validate(payload)
            party = self.resolve_party(request.party_id)
            content = await asyncio.to_thread(self.render, party)
            file_path = await asyncio.to_thread(self.persist, party, content)
            await self.send(request, file_path)

        except StatementDeliveryError as e:
            if e.outcome.is_client_error:
                logger.warning(f"명세서 발송 거부 ({e.outcome.value}): {e.message}")
            else:
                logger.error(f"명세서 발송 실패 ({e.outcome.value}): {e.message}")
            return StatementFailed(outcome=e.outcome, message=e.message)

        except ConfigurationError as e:
            logger.error(f"명세서 발송 실패 (SMTP 설정 누락): {e}")
            return StatementFailed(outcome=DeliveryOutcome.CONFIGURATION_ERROR, message=str(e))

        logger.info(f"명세서 발송 완료: {party.id} → {request.email} ({file_path})")
        return StatementSent(file_path=file_path)

    # -------------------------------------------------------------------------
    # 단계
    # -------------------------------------------------------------------------

    def validate(self, payload: Any) -> SendEmailRequest:
        """1. 요청 검증 (부수 효과 이전에 실행)"""
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except ValueError as e:
                raise PayloadValidationError("Invalid JSON payload") from e

        try:
            return SendEmailRequest.model_validate(payload)
        except ValidationError as e:
            raise PayloadValidationError(first_error_message(e)) from e

    def resolve_party(self, party_id: str) -> Party:
        """2. 거래처 조회"""
        party = self.store.find_party(party_id)
        if party is None:
            raise PartyNotFoundError(PARTY_NOT_SELECTED_MESSAGE)
        return party

    def render(self, party: Party) -> bytes:
        """3. PDF 생성"""
        entries = self.store.get_ledger_for_party(party.id)
        try:
            rendered = self.renderer.render(party, entries, self.financial_year)
        except Exception as e:
            raise RenderError(f"Failed to render ledger statement: {e}") from e
        return rendered.content

    def persist(self, party: Party, content: bytes) -> Path:
        """4. 파일 저장 (같은 거래처는 덮어씀)"""
        file_path = self.output_dir / statement_file_name(party.name)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(content)
        except OSError as e:
            raise PersistError(f"Failed to write ledger statement: {e}") from e

        logger.debug(f"명세서 저장: {file_path} ({len(content)} bytes)")
        return file_path

    async def send(self, request: SendEmailRequest, file_path: Path) -> None:
        """5. 메일 발송 (설정 누락은 ConfigurationError로 전파)"""
        mailer = self.mailer_factory()

        try:
            await mailer.send(
                recipient=request.email,
                subject=request.subject,
                body=request.body,
                attachments=[file_path],
            )
        except Exception as e:
            raise DeliveryError(str(e) or "Failed to send email") from e
