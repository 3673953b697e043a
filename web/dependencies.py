"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from fastapi import Depends

from adapters.interfaces import IMailer
from adapters.smtp.mailer import create_mailer
from core.config.loader import Settings, get_settings
from core.ledger.store import LedgerStore
from core.ledger.types import FinancialYear
from core.statement.renderer import StatementRenderer
from web.services.party_service import PartyService
from web.services.statement_service import MailerFactory, StatementDeliveryService


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


# =========================================================================
# 시작 시 초기화되는 불변 값 (lifespan에서 설정)
# =========================================================================

_ledger_store: LedgerStore | None = None
_financial_year: FinancialYear | None = None


def set_ledger_store(store: LedgerStore | None) -> None:
    """LedgerStore 설정

    앱 시작 시 호출하여 전역 인스턴스 설정.
    """
    global _ledger_store
    _ledger_store = store


def set_financial_year(financial_year: FinancialYear | None) -> None:
    """FinancialYear 설정

    앱 시작 시 호출하여 전역 값 설정.
    """
    global _financial_year
    _financial_year = financial_year


def get_ledger_store() -> LedgerStore:
    """LedgerStore 반환

    Raises:
        RuntimeError: 초기화 전 호출 시
    """
    if _ledger_store is None:
        raise RuntimeError("LedgerStore가 초기화되지 않았습니다")
    return _ledger_store


def get_financial_year() -> FinancialYear:
    """FinancialYear 반환

    Raises:
        RuntimeError: 초기화 전 호출 시
    """
    if _financial_year is None:
        raise RuntimeError("FinancialYear가 초기화되지 않았습니다")
    return _financial_year


# =========================================================================
# 메일 발송
# =========================================================================


def _default_mailer_factory() -> IMailer:
    """설정에서 SmtpMailer 생성 (설정 누락 시 ConfigurationError)"""
    return create_mailer(get_settings().load_mail_config())


def get_mailer_factory() -> MailerFactory:
    """IMailer 생성 함수 반환 (테스트에서 override)"""
    return _default_mailer_factory


# =========================================================================
# 서비스
# =========================================================================


def get_statement_service(
    store: LedgerStore = Depends(get_ledger_store),
    financial_year: FinancialYear = Depends(get_financial_year),
    settings: Settings = Depends(get_app_settings),
    mailer_factory: MailerFactory = Depends(get_mailer_factory),
) -> StatementDeliveryService:
    """명세서 발송 서비스 반환"""
    return StatementDeliveryService(
        store=store,
        financial_year=financial_year,
        output_dir=settings.output_dir,
        mailer_factory=mailer_factory,
        renderer=StatementRenderer(locale=settings.locale, currency=settings.currency),
    )


def get_party_service(
    store: LedgerStore = Depends(get_ledger_store),
    financial_year: FinancialYear = Depends(get_financial_year),
    settings: Settings = Depends(get_app_settings),
) -> PartyService:
    """거래처 서비스 반환"""
    return PartyService(
        store=store,
        financial_year=financial_year,
        locale=settings.locale,
        currency=settings.currency,
    )
