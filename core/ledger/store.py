"""
Ledger 저장소

거래처/원장 시드 데이터 보관 및 조회.
시작 시 한 번 구성되며 이후 읽기 전용.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from core.ledger.seed import SEED_ENTRIES, SEED_PARTIES
from core.ledger.types import LedgerEntry, LedgerEntrySeed, Party

logger = logging.getLogger(__name__)


def compute_running_balances(seeds: Iterable[LedgerEntrySeed]) -> list[LedgerEntry]:
    """거래처별 누적 잔액 계산

    거래처별로 (날짜, 시드 순서) 오름차순 정렬 후 한 번 순회.
    balance = 이전 balance + credit - debit (첫 항목 이전 잔액은 0)

    Args:
        seeds: 원장 시드 항목

    Returns:
        잔액이 채워진 LedgerEntry 목록 (입력 순서 유지)
    """
    indexed = list(enumerate(seeds))

    by_party: dict[str, list[tuple[int, LedgerEntrySeed]]] = {}
    for seq, seed in indexed:
        by_party.setdefault(seed.party_id, []).append((seq, seed))

    balances: dict[int, Decimal] = {}
    for items in by_party.values():
        running = Decimal("0")
        for seq, seed in sorted(items, key=lambda item: (item[1].date, item[0])):
            running += seed.credit - seed.debit
            balances[seq] = running

    return [
        LedgerEntry(
            id=seed.id,
            party_id=seed.party_id,
            date=seed.date,
            reference=seed.reference,
            particulars=seed.particulars,
            debit=seed.debit,
            credit=seed.credit,
            balance=balances[seq],
            seq=seq,
        )
        for seq, seed in indexed
    ]


class LedgerStore:
    """Ledger 저장소

    거래처와 원장 항목을 메모리에 보관하는 읽기 전용 저장소.
    생성/수정/삭제 API 없음.

    Args:
        parties: 거래처 목록
        entries: 잔액 계산이 끝난 원장 항목 목록
    """

    def __init__(self, parties: Iterable[Party], entries: Iterable[LedgerEntry]):
        self._parties: tuple[Party, ...] = tuple(parties)
        self._entries: tuple[LedgerEntry, ...] = tuple(entries)
        self._party_index: dict[str, Party] = {p.id: p for p in self._parties}

    # -------------------------------------------------------------------------
    # 전체 조회
    # -------------------------------------------------------------------------

    def list_parties(self) -> tuple[Party, ...]:
        """거래처 목록 (시드 순서)"""
        return self._parties

    def list_entries(self) -> tuple[LedgerEntry, ...]:
        """원장 항목 목록 (시드 순서)"""
        return self._entries

    # -------------------------------------------------------------------------
    # 거래처별 조회
    # -------------------------------------------------------------------------

    def find_party(self, party_id: str) -> Party | None:
        """거래처 조회

        Args:
            party_id: 거래처 ID

        Returns:
            거래처 또는 None (없는 경우, 오류 아님)
        """
        return self._party_index.get(party_id)

    def get_ledger_for_party(self, party_id: str) -> tuple[LedgerEntry, ...]:
        """거래처 원장 조회

        Args:
            party_id: 거래처 ID

        Returns:
            (날짜, 시드 순서) 오름차순 원장 항목.
            거래처가 없거나 항목이 없으면 빈 튜플.
        """
        entries = [e for e in self._entries if e.party_id == party_id]
        return tuple(sorted(entries, key=lambda e: e.sort_key))

    def closing_balance(self, party_id: str) -> Decimal:
        """거래처 최종 잔액 (항목 없으면 0)"""
        ledger = self.get_ledger_for_party(party_id)
        if not ledger:
            return Decimal("0")
        return ledger[-1].balance


def build_ledger_store(
    parties: Iterable[Party] = SEED_PARTIES,
    seeds: Iterable[LedgerEntrySeed] = SEED_ENTRIES,
) -> LedgerStore:
    """LedgerStore 초기화

    시작 시 한 번 호출. 시드 데이터를 검증하고 누적 잔액을 계산.

    Args:
        parties: 거래처 시드
        seeds: 원장 시드

    Returns:
        읽기 전용 LedgerStore

    Raises:
        ValueError: 중복 ID, 알 수 없는 거래처, 음수 금액인 경우
    """
    parties = tuple(parties)
    seeds = tuple(seeds)

    party_ids = [p.id for p in parties]
    if len(set(party_ids)) != len(party_ids):
        raise ValueError("Duplicate party id in seed data")

    entry_ids = [s.id for s in seeds]
    if len(set(entry_ids)) != len(entry_ids):
        raise ValueError("Duplicate ledger entry id in seed data")

    known = set(party_ids)
    for seed in seeds:
        if seed.party_id not in known:
            raise ValueError(f"Unknown party id '{seed.party_id}' in entry {seed.id}")
        if seed.debit < 0 or seed.credit < 0:
            raise ValueError(f"Negative amount in entry {seed.id}")

    store = LedgerStore(parties, compute_running_balances(seeds))
    logger.info(f"LedgerStore 초기화 완료: 거래처 {len(parties)}건, 원장 {len(seeds)}건")
    return store
