"""
원장 명세서 (Ledger Statement)

PDF 렌더링 및 표시 포맷.
"""

from core.statement.formatting import (
    build_statement_rows,
    format_amount_or_dash,
    format_money,
    format_period,
    format_short_date,
    statement_file_name,
)
from core.statement.renderer import (
    COLUMN_HEADERS,
    COLUMN_WIDTHS,
    RenderedStatement,
    StatementRenderer,
    column_offsets,
    render_statement,
)

__all__ = [
    "COLUMN_HEADERS",
    "COLUMN_WIDTHS",
    "RenderedStatement",
    "StatementRenderer",
    "build_statement_rows",
    "column_offsets",
    "format_amount_or_dash",
    "format_money",
    "format_period",
    "format_short_date",
    "render_statement",
    "statement_file_name",
]
