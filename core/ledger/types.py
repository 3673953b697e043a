"""
거래처 원장 타입 정의

Party, LedgerEntry, FinancialYear 등 원장 조회/명세서 생성에서 사용하는 불변 데이터 구조.
금액은 반드시 Decimal 타입 사용.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Party:
    """거래처 (고객/공급처)

    시작 시 시드 목록에서 생성되며 런타임 중 변경되지 않음.
    """

    id: str
    name: str
    email: str
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class LedgerEntrySeed:
    """원장 시드 항목 (잔액 계산 전)"""

    id: str
    party_id: str
    date: date
    reference: str
    particulars: str
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")


@dataclass(frozen=True)
class LedgerEntry:
    """원장 항목

    balance는 파생 값으로, LedgerStore 초기화 시에만 계산됨.
    balance[i] = balance[i-1] + credit[i] - debit[i]
    """

    id: str
    party_id: str
    date: date
    reference: str
    particulars: str
    debit: Decimal
    credit: Decimal
    balance: Decimal
    seq: int  # 시드 순서 (같은 날짜 정렬용 2차 키)

    @property
    def sort_key(self) -> tuple[date, int]:
        """(날짜, 시드 순서) 정렬 키"""
        return (self.date, self.seq)


@dataclass(frozen=True)
class FinancialYear:
    """회계연도 (4월 1일 시작)

    end는 회계연도 실제 종료일이 아니라 계산 시점 당일 끝 (누적 조회 기간).
    """

    label: str
    start: datetime
    end: datetime

    def to_dict(self) -> dict[str, str]:
        """딕셔너리 변환"""
        return {
            "label": self.label,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }
