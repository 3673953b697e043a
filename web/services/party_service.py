"""
거래처 서비스

거래처 목록 및 원장 미리보기 조회.
표시 문자열은 PDF 명세서와 같은 포맷 규칙 사용.
"""

import logging
from typing import Any

from core.constants import Defaults
from core.ledger.store import LedgerStore
from core.ledger.types import FinancialYear, LedgerEntry, Party
from core.statement.formatting import (
    format_amount_or_dash,
    format_money,
    format_short_date,
)

logger = logging.getLogger(__name__)


def party_to_dict(party: Party) -> dict[str, Any]:
    """Party → 딕셔너리"""
    return {
        "id": party.id,
        "name": party.name,
        "email": party.email,
        "phone": party.phone,
        "address": party.address,
    }


class PartyService:
    """거래처 서비스

    Args:
        store: LedgerStore
        financial_year: 회계연도
        locale: 표시 로케일
        currency: 통화 코드
    """

    def __init__(
        self,
        store: LedgerStore,
        financial_year: FinancialYear,
        locale: str = Defaults.LOCALE,
        currency: str = Defaults.CURRENCY,
    ):
        self.store = store
        self.financial_year = financial_year
        self.locale = locale
        self.currency = currency

    def list_parties(self) -> list[dict[str, Any]]:
        """거래처 목록"""
        return [party_to_dict(p) for p in self.store.list_parties()]

    def get_party(self, party_id: str) -> dict[str, Any] | None:
        """거래처 조회 (없으면 None)"""
        party = self.store.find_party(party_id)
        if party is None:
            return None
        return party_to_dict(party)

    def get_ledger_preview(self, party_id: str) -> dict[str, Any]:
        """거래처 원장 미리보기

        거래처가 없거나 항목이 없으면 빈 entries.
        """
        entries = self.store.get_ledger_for_party(party_id)
        closing = self.store.closing_balance(party_id)

        return {
            "party_id": party_id,
            "financial_year": self.financial_year.to_dict(),
            "entries": [self._entry_to_dict(e) for e in entries],
            "closing_balance": str(closing),
            "closing_balance_display": format_money(closing, self.currency, self.locale),
        }

    def _entry_to_dict(self, entry: LedgerEntry) -> dict[str, Any]:
        return {
            "id": entry.id,
            "date": entry.date.isoformat(),
            "reference": entry.reference,
            "particulars": entry.particulars,
            "debit": str(entry.debit),
            "credit": str(entry.credit),
            "balance": str(entry.balance),
            "date_display": format_short_date(entry.date, self.locale),
            "debit_display": format_amount_or_dash(entry.debit, self.currency, self.locale),
            "credit_display": format_amount_or_dash(entry.credit, self.currency, self.locale),
            "balance_display": format_money(entry.balance, self.currency, self.locale),
        }
