"""
명세서 표시 포맷

날짜/금액 표시 규칙 (PDF와 미리보기 API 공통).
- 날짜: 로케일 short 형식
- 금액: 로케일 통화 형식, 차변/대변 0은 "-"
"""

import re
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from babel.dates import format_date
from babel.numbers import format_currency

from core.constants import Defaults
from core.ledger.types import FinancialYear, LedgerEntry

# 영숫자 외 문자 (파일명 치환 대상, ASCII 기준)
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")

ZERO_PLACEHOLDER = "-"


def format_money(
    amount: Decimal,
    currency: str = Defaults.CURRENCY,
    locale: str = Defaults.LOCALE,
) -> str:
    """통화 형식 문자열 (예: ₹1,52,000.00)"""
    return format_currency(amount, currency, locale=locale)


def format_amount_or_dash(
    amount: Decimal,
    currency: str = Defaults.CURRENCY,
    locale: str = Defaults.LOCALE,
) -> str:
    """차변/대변 표시 (0이면 "-")"""
    if not amount:
        return ZERO_PLACEHOLDER
    return format_money(amount, currency, locale)


def format_short_date(value: date | datetime, locale: str = Defaults.LOCALE) -> str:
    """로케일 short 날짜 (en_IN: 05/04/24)"""
    if isinstance(value, datetime):
        value = value.date()
    return format_date(value, format="short", locale=locale)


def format_period(financial_year: FinancialYear, locale: str = Defaults.LOCALE) -> str:
    """조회 기간 "<시작> - <종료>" 표시"""
    start = format_short_date(financial_year.start, locale)
    end = format_short_date(financial_year.end, locale)
    return f"{start} - {end}"


def statement_file_name(party_name: str) -> str:
    """명세서 파일명 (Ledger_<영숫자 외 문자는 _>.pdf)"""
    return f"Ledger_{_NON_ALNUM.sub('_', party_name)}.pdf"


def build_statement_row(
    entry: LedgerEntry,
    currency: str = Defaults.CURRENCY,
    locale: str = Defaults.LOCALE,
) -> tuple[str, str, str, str, str, str]:
    """원장 항목 → 표 한 행 (Date, Reference, Particulars, Debit, Credit, Balance)"""
    return (
        format_short_date(entry.date, locale),
        entry.reference,
        entry.particulars,
        format_amount_or_dash(entry.debit, currency, locale),
        format_amount_or_dash(entry.credit, currency, locale),
        format_money(entry.balance, currency, locale),
    )


def build_statement_rows(
    entries: Iterable[LedgerEntry],
    currency: str = Defaults.CURRENCY,
    locale: str = Defaults.LOCALE,
) -> list[tuple[str, str, str, str, str, str]]:
    """원장 항목 목록 → 표 행 목록 (입력 순서 유지)"""
    return [build_statement_row(entry, currency, locale) for entry in entries]
