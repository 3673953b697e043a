"""
회계연도 계산

회계연도는 4월 1일 시작. 1~3월이면 전년도가 시작 연도.
"""

from datetime import datetime, time

from core.ledger.types import FinancialYear

# 회계연도 시작 월 (4월)
FY_START_MONTH = 4


def compute_financial_year(today: datetime | None = None) -> FinancialYear:
    """회계연도 계산

    시작 시 한 번 호출하여 불변 값으로 보관.
    end는 회계연도 종료일(3월 31일)이 아니라 기준일 당일 끝.

    Args:
        today: 기준 시각 (None이면 현재 로컬 시각)

    Returns:
        FinancialYear

    Example:
        >>> compute_financial_year(datetime(2024, 2, 15)).label
        '2023-2024'
        >>> compute_financial_year(datetime(2024, 4, 15)).label
        '2024-2025'
    """
    if today is None:
        today = datetime.now()

    year = today.year - 1 if today.month < FY_START_MONTH else today.year

    start = datetime(year, FY_START_MONTH, 1, tzinfo=today.tzinfo)
    end = datetime.combine(today.date(), time.max, tzinfo=today.tzinfo)

    return FinancialYear(label=f"{year}-{year + 1}", start=start, end=end)
