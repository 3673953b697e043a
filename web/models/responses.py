"""
응답 스키마 (Pydantic)

Web API 응답 데이터 정의
"""

from pydantic import BaseModel, Field


class SendEmailResponse(BaseModel):
    """메일 발송 성공 응답"""

    success: bool = True
    message: str
    file_path: str = Field(..., alias="filePath", description="저장된 PDF 경로")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """오류 응답 (400/404/500)"""

    error: str


class PartyResponse(BaseModel):
    """거래처 응답"""

    id: str
    name: str
    email: str
    phone: str | None = None
    address: str | None = None


class LedgerEntryResponse(BaseModel):
    """원장 항목 응답

    금액은 문자열 (Decimal 정밀도 유지), *_display는 로케일 표시 문자열.
    """

    id: str
    date: str
    reference: str
    particulars: str
    debit: str
    credit: str
    balance: str
    date_display: str
    debit_display: str
    credit_display: str
    balance_display: str


class FinancialYearResponse(BaseModel):
    """회계연도 응답"""

    label: str
    start: str
    end: str


class LedgerPreviewResponse(BaseModel):
    """거래처 원장 미리보기 응답"""

    party_id: str
    financial_year: FinancialYearResponse
    entries: list[LedgerEntryResponse]
    closing_balance: str
    closing_balance_display: str


class EmailDefaultsResponse(BaseModel):
    """메일 작성 기본값 응답"""

    subject: str
    body: str


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str
    version: str
