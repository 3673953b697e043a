"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import SendEmailRequest, first_error_message
from web.models.responses import (
    EmailDefaultsResponse,
    ErrorResponse,
    FinancialYearResponse,
    HealthResponse,
    LedgerEntryResponse,
    LedgerPreviewResponse,
    PartyResponse,
    SendEmailResponse,
)

__all__ = [
    # Requests
    "SendEmailRequest",
    "first_error_message",
    # Responses
    "EmailDefaultsResponse",
    "ErrorResponse",
    "FinancialYearResponse",
    "HealthResponse",
    "LedgerEntryResponse",
    "LedgerPreviewResponse",
    "PartyResponse",
    "SendEmailResponse",
]
