"""
원장 명세서 PDF 렌더러

거래처 + 원장 항목 + 회계연도 → PDF 바이트 (메모리 내 완성본).

레이아웃:
- 거래처명 / 주소 / 전화
- "Ledger Statement", 회계연도, 조회 기간
- 6열 표 (Date, Reference, Particulars, Debit, Credit, Balance)
  왼쪽 여백 50 기준, 열 너비 {90, 90, 160, 80, 80, 90}
  금액 열(3~5)은 오른쪽 정렬, 헤더는 Helvetica-Bold
- 하단 여백을 넘으면 새 페이지에 헤더 행부터 다시 출력
"""

import io
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from reportlab.lib.pagesizes import LETTER, landscape
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen.canvas import Canvas

from core.constants import Defaults
from core.ledger.types import FinancialYear, LedgerEntry, Party
from core.statement.formatting import build_statement_rows, format_period

logger = logging.getLogger(__name__)


# 레이아웃 상수 (PDF 포인트)
MARGIN = 50
COLUMN_WIDTHS: tuple[int, ...] = (90, 90, 160, 80, 80, 90)
COLUMN_HEADERS: tuple[str, ...] = ("Date", "Reference", "Particulars", "Debit", "Credit", "Balance")
NUMERIC_COLUMN_START = 3  # Debit 열부터 오른쪽 정렬
TABLE_GAP = 10
ROW_GAP = 5
LEADING = 1.2

# 표 전체 너비(640pt)가 세로 LETTER(612pt)를 넘으므로 가로 방향 사용
PAGE_SIZE = landscape(LETTER)

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

NAME_FONT_SIZE = 18
ADDRESS_FONT_SIZE = 12
TITLE_FONT_SIZE = 14
PERIOD_FONT_SIZE = 11
TABLE_FONT_SIZE = 11


def column_offsets(widths: Sequence[int] = COLUMN_WIDTHS, margin: int = MARGIN) -> list[int]:
    """열 시작 x 좌표 (왼쪽 여백 + 앞 열 너비 누적)"""
    offsets = []
    x = margin
    for width in widths:
        offsets.append(x)
        x += width
    return offsets


@dataclass(frozen=True)
class RenderedStatement:
    """렌더링 결과"""

    content: bytes
    page_count: int


class StatementRenderer:
    """원장 명세서 렌더러

    거래처 존재 여부는 재검증하지 않음 (호출 측 책임).
    렌더링 중 예외는 그대로 전파 (부분 문서 복구 없음).

    Args:
        locale: 날짜/금액 표시 로케일
        currency: 통화 코드
        pagesize: 페이지 크기 (width, height)
    """

    def __init__(
        self,
        locale: str = Defaults.LOCALE,
        currency: str = Defaults.CURRENCY,
        pagesize: tuple[float, float] = PAGE_SIZE,
    ):
        self.locale = locale
        self.currency = currency
        self.pagesize = pagesize
        self._offsets = column_offsets()

    def render(
        self,
        party: Party,
        entries: Sequence[LedgerEntry],
        financial_year: FinancialYear,
    ) -> RenderedStatement:
        """명세서 PDF 생성

        Args:
            party: 거래처
            entries: 원장 항목 (이 순서대로 출력)
            financial_year: 회계연도

        Returns:
            RenderedStatement (PDF 바이트, 페이지 수)
        """
        buffer = io.BytesIO()
        pdf = Canvas(buffer, pagesize=self.pagesize)
        pdf.setTitle(f"Ledger Statement - {party.name}")
        pdf.setAuthor(Defaults.APP_NAME)

        y = self._draw_party_header(pdf, party, financial_year)
        y = self._draw_table_header(pdf, y + TABLE_GAP)

        rows = build_statement_rows(entries, self.currency, self.locale)
        for row in rows:
            y = self._draw_row(pdf, row, y + ROW_GAP)

        page_count = pdf.getPageNumber()
        pdf.showPage()
        pdf.save()

        content = buffer.getvalue()
        logger.debug(
            f"명세서 렌더링 완료: {party.id} ({len(rows)}행, {page_count}페이지, {len(content)} bytes)"
        )
        return RenderedStatement(content=content, page_count=page_count)

    # -------------------------------------------------------------------------
    # 내부 그리기 (y는 페이지 상단 기준 누적 위치)
    # -------------------------------------------------------------------------

    @property
    def _page_height(self) -> float:
        return self.pagesize[1]

    def _baseline(self, top: float, size: float) -> float:
        return self._page_height - top - size

    def _text_line(self, pdf: Canvas, y: float, text: str, font: str, size: float) -> float:
        pdf.setFont(font, size)
        pdf.drawString(MARGIN, self._baseline(y, size), text)
        return y + size * LEADING

    def _draw_party_header(self, pdf: Canvas, party: Party, financial_year: FinancialYear) -> float:
        y: float = MARGIN

        y = self._text_line(pdf, y, party.name, FONT_REGULAR, NAME_FONT_SIZE)
        y += NAME_FONT_SIZE * LEADING * 0.5

        y = self._text_line(pdf, y, party.address or "", FONT_REGULAR, ADDRESS_FONT_SIZE)
        if party.phone:
            y = self._text_line(pdf, y, f"Phone: {party.phone}", FONT_REGULAR, ADDRESS_FONT_SIZE)
        y += ADDRESS_FONT_SIZE * LEADING

        y = self._text_line(pdf, y, "Ledger Statement", FONT_REGULAR, TITLE_FONT_SIZE)
        y = self._text_line(
            pdf, y, f"Financial Year: {financial_year.label}", FONT_REGULAR, PERIOD_FONT_SIZE
        )
        y = self._text_line(
            pdf,
            y,
            f"Period: {format_period(financial_year, self.locale)}",
            FONT_REGULAR,
            PERIOD_FONT_SIZE,
        )
        y += PERIOD_FONT_SIZE * LEADING
        return y

    def _draw_cells(self, pdf: Canvas, cells: Sequence[str], top: float, font: str) -> float:
        """한 행 출력 (셀 텍스트는 열 너비 안에서 줄바꿈), 행 높이 반환"""
        size = TABLE_FONT_SIZE
        line_height = size * LEADING
        pdf.setFont(font, size)

        max_lines = 1
        for index, cell in enumerate(cells):
            x = self._offsets[index]
            width = COLUMN_WIDTHS[index]
            lines = simpleSplit(cell, font, size, width) or [""]
            max_lines = max(max_lines, len(lines))

            for line_no, line in enumerate(lines):
                baseline = self._baseline(top + line_no * line_height, size)
                if index >= NUMERIC_COLUMN_START:
                    pdf.drawRightString(x + width, baseline, line)
                else:
                    pdf.drawString(x, baseline, line)

        return max_lines * line_height

    def _row_height(self, cells: Sequence[str], font: str) -> float:
        size = TABLE_FONT_SIZE
        max_lines = max(
            len(simpleSplit(cell, font, size, COLUMN_WIDTHS[i]) or [""])
            for i, cell in enumerate(cells)
        )
        return max_lines * size * LEADING

    def _draw_table_header(self, pdf: Canvas, top: float) -> float:
        height = self._draw_cells(pdf, COLUMN_HEADERS, top, FONT_BOLD)
        return top + height

    def _draw_row(self, pdf: Canvas, row: Sequence[str], top: float) -> float:
        if top + self._row_height(row, FONT_REGULAR) > self._page_height - MARGIN:
            pdf.showPage()
            top = self._draw_table_header(pdf, MARGIN) + ROW_GAP

        height = self._draw_cells(pdf, row, top, FONT_REGULAR)
        return top + height


def render_statement(
    party: Party,
    entries: Sequence[LedgerEntry],
    financial_year: FinancialYear,
    locale: str = Defaults.LOCALE,
    currency: str = Defaults.CURRENCY,
) -> bytes:
    """명세서 PDF 바이트 생성 (StatementRenderer 단축 함수)"""
    renderer = StatementRenderer(locale=locale, currency=currency)
    return renderer.render(party, entries, financial_year).content
