"""
core/statement/renderer.py 테스트

PDF 생성, 열 배치, 페이지 나눔
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from reportlab import rl_config

from core.ledger.store import LedgerStore, compute_running_balances
from core.ledger.types import FinancialYear, LedgerEntrySeed, Party
from core.statement.renderer import (
    COLUMN_HEADERS,
    COLUMN_WIDTHS,
    PAGE_SIZE,
    StatementRenderer,
    column_offsets,
    render_statement,
)


class TestLayout:
    """레이아웃 상수 테스트"""

    def test_column_widths(self) -> None:
        """열 너비"""
        assert COLUMN_WIDTHS == (90, 90, 160, 80, 80, 90)
        assert COLUMN_HEADERS == ("Date", "Reference", "Particulars", "Debit", "Credit", "Balance")

    def test_column_offsets(self) -> None:
        """왼쪽 여백 50 + 앞 열 너비 누적"""
        assert column_offsets() == [50, 140, 230, 390, 470, 550]

    def test_table_fits_page(self) -> None:
        """표 오른쪽 끝이 페이지 안"""
        assert column_offsets()[-1] + COLUMN_WIDTHS[-1] <= PAGE_SIZE[0]


class TestStatementRenderer:
    """StatementRenderer 테스트"""

    @pytest.fixture
    def abc_party(self, ledger_store: LedgerStore) -> Party:
        party = ledger_store.find_party("abc-co")
        assert party is not None
        return party

    def test_render_pdf(
        self,
        ledger_store: LedgerStore,
        abc_party: Party,
        financial_year: FinancialYear,
    ) -> None:
        """PDF 바이트 생성"""
        rendered = StatementRenderer().render(
            abc_party,
            ledger_store.get_ledger_for_party("abc-co"),
            financial_year,
        )

        assert rendered.content.startswith(b"%PDF")
        assert rendered.content.rstrip().endswith(b"%%EOF")
        assert rendered.page_count == 1

    def test_render_without_entries(self, abc_party: Party, financial_year: FinancialYear) -> None:
        """원장 항목 없어도 생성"""
        rendered = StatementRenderer().render(abc_party, [], financial_year)

        assert rendered.content.startswith(b"%PDF")
        assert rendered.page_count == 1

    def test_render_party_without_optional_fields(self, financial_year: FinancialYear) -> None:
        """주소/전화 없는 거래처"""
        party = Party(id="bare", name="Bare Co", email="bare@co.in")

        rendered = StatementRenderer().render(party, [], financial_year)

        assert rendered.content.startswith(b"%PDF")

    def test_long_ledger_is_paginated(self, abc_party: Party, financial_year: FinancialYear) -> None:
        """긴 원장은 여러 페이지"""
        seeds = [
            LedgerEntrySeed(
                id=f"e{i}",
                party_id="abc-co",
                date=date(2024, 4, 1) + timedelta(days=i),
                reference=f"SA/24-{i:04d}",
                particulars="Sales Invoice",
                credit=Decimal("1000"),
            )
            for i in range(80)
        ]
        entries = compute_running_balances(seeds)

        rendered = StatementRenderer().render(abc_party, entries, financial_year)

        assert rendered.page_count >= 3

    def test_long_particulars_wrap(self, abc_party: Party, financial_year: FinancialYear) -> None:
        """긴 적요는 열 안에서 줄바꿈"""
        entries = compute_running_balances([
            LedgerEntrySeed(
                id="long",
                party_id="abc-co",
                date=date(2024, 4, 1),
                reference="JV/24-0001",
                particulars="Adjustment against credit note " * 6,
                credit=Decimal("10"),
            )
        ])

        rendered = StatementRenderer().render(abc_party, entries, financial_year)

        assert rendered.page_count == 1

    def test_render_error_propagates(self, abc_party: Party, financial_year: FinancialYear) -> None:
        """렌더링 오류는 전파"""
        renderer = StatementRenderer(locale="not_a_locale")

        entries = compute_running_balances([
            LedgerEntrySeed(
                id="x",
                party_id="abc-co",
                date=date(2024, 4, 1),
                reference="R",
                particulars="P",
                credit=Decimal("1"),
            )
        ])

        with pytest.raises(Exception):
            renderer.render(abc_party, entries, financial_year)

    def test_render_statement_shortcut(
        self,
        ledger_store: LedgerStore,
        abc_party: Party,
        financial_year: FinancialYear,
    ) -> None:
        """render_statement 단축 함수"""
        content = render_statement(
            abc_party,
            ledger_store.get_ledger_for_party("abc-co"),
            financial_year,
        )

        assert content.startswith(b"%PDF")


class TestStatementContent:
    """명세서 본문 내용 테스트 (비압축 PDF 콘텐츠 스트림 검사)"""

    @pytest.fixture(autouse=True)
    def uncompressed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(rl_config, "pageCompression", 0)

    @pytest.fixture
    def abc_party(self, ledger_store: LedgerStore) -> Party:
        party = ledger_store.find_party("abc-co")
        assert party is not None
        return party

    def test_header_block(
        self,
        ledger_store: LedgerStore,
        abc_party: Party,
        financial_year: FinancialYear,
    ) -> None:
        """거래처명, 제목, 회계연도, 조회 기간"""
        content = StatementRenderer(locale="en_US").render(
            abc_party,
            ledger_store.get_ledger_for_party("abc-co"),
            financial_year,
        ).content

        assert b"(ABC Company Ltd)" in content
        assert b"(15B Park Street, Kolkata)" in content
        assert b"(Phone: +91 9830012345)" in content
        assert b"(Ledger Statement)" in content
        assert b"(Financial Year: 2024-2025)" in content
        assert b"(Period: 4/1/24 - 6/1/24)" in content

    def test_table_cells(
        self,
        ledger_store: LedgerStore,
        abc_party: Party,
        financial_year: FinancialYear,
    ) -> None:
        """표 헤더, 날짜/참조/적요 셀, 0 금액은 "-" """
        content = StatementRenderer(locale="en_US").render(
            abc_party,
            ledger_store.get_ledger_for_party("abc-co"),
            financial_year,
        ).content

        for header in COLUMN_HEADERS:
            assert b"(" + header.encode("ascii") + b")" in content
        assert b"(4/5/24)" in content
        assert b"(SA/24-0001)" in content
        assert b"(Receipt)" in content
        # 1행 차변 0, 2행 대변 0
        assert content.count(b"(-)") == 2

    def test_header_repeated_on_every_page(self, abc_party: Party, financial_year: FinancialYear) -> None:
        """페이지마다 표 헤더 반복"""
        entries = compute_running_balances([
            LedgerEntrySeed(
                id=f"e{i}",
                party_id="abc-co",
                date=date(2024, 4, 1) + timedelta(days=i),
                reference=f"SA/24-{i:04d}",
                particulars="Sales Invoice",
                credit=Decimal("1000"),
            )
            for i in range(60)
        ])

        rendered = StatementRenderer(locale="en_US").render(abc_party, entries, financial_year)

        assert rendered.page_count >= 2
        assert rendered.content.count(b"(Balance)") == rendered.page_count
        assert rendered.content.count(b"(Particulars)") == rendered.page_count
        assert b"(SA/24-0059)" in rendered.content
