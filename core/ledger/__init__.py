"""
거래처 원장 (Party Ledger)

거래처별 누적 잔액을 계산하는 읽기 전용 원장.

사용 예시:
```python
from core.ledger import build_ledger_store, compute_financial_year

store = build_ledger_store()
financial_year = compute_financial_year()

party = store.find_party("abc-co")
entries = store.get_ledger_for_party("abc-co")
```
"""

from core.ledger.financial_year import compute_financial_year
from core.ledger.store import LedgerStore, build_ledger_store, compute_running_balances
from core.ledger.types import FinancialYear, LedgerEntry, LedgerEntrySeed, Party

__all__ = [
    "FinancialYear",
    "LedgerEntry",
    "LedgerEntrySeed",
    "LedgerStore",
    "Party",
    "build_ledger_store",
    "compute_financial_year",
    "compute_running_balances",
]
