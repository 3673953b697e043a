"""
원장 명세서 API 라우터

POST /api/send-email - 명세서 PDF 생성 후 메일 발송
GET /api/email/defaults - 메일 작성 기본값
GET /api/financial-year - 현재 회계연도
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.constants import Defaults
from core.ledger.types import FinancialYear
from web.dependencies import get_financial_year, get_statement_service
from web.models.responses import (
    EmailDefaultsResponse,
    ErrorResponse,
    FinancialYearResponse,
    SendEmailResponse,
)
from web.services.statement_service import StatementDeliveryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Statements"])


@router.post(
    "/send-email",
    response_model=SendEmailResponse,
    responses={
        400: {"model": ErrorResponse, "description": "검증 실패 또는 거래처 없음"},
        500: {"model": ErrorResponse, "description": "설정/생성/저장/발송 실패"},
    },
)
async def send_email(
    request: Request,
    service: StatementDeliveryService = Depends(get_statement_service),
) -> JSONResponse:
    """원장 명세서 메일 발송

    요청 본문은 서비스에서 직접 검증 (첫 번째 위반 규칙 메시지를 400으로 반환).

    Returns:
        200: {success, message, filePath}
        400/500: {error}
    """
    payload = await request.body()
    result = await service.deliver(payload)

    return JSONResponse(status_code=result.outcome.http_status, content=result.to_dict())


@router.get("/email/defaults", response_model=EmailDefaultsResponse)
async def get_email_defaults() -> dict[str, Any]:
    """메일 작성 기본값 (제목/본문)"""
    return {"subject": Defaults.EMAIL_SUBJECT, "body": Defaults.EMAIL_BODY}


@router.get("/financial-year", response_model=FinancialYearResponse)
async def get_current_financial_year(
    financial_year: FinancialYear = Depends(get_financial_year),
) -> dict[str, Any]:
    """현재 회계연도 (시작 시 계산된 값)"""
    return financial_year.to_dict()
