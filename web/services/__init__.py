"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.party_service import PartyService
from web.services.statement_service import (
    StatementDeliveryService,
    StatementFailed,
    StatementSent,
)

__all__ = [
    "PartyService",
    "StatementDeliveryService",
    "StatementFailed",
    "StatementSent",
]
