"""
거래처 API 라우터

거래처 목록 및 원장 미리보기
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from web.dependencies import get_party_service
from web.models.responses import ErrorResponse, LedgerPreviewResponse, PartyResponse
from web.services.party_service import PartyService

router = APIRouter(prefix="/api/parties", tags=["Parties"])


@router.get("", response_model=list[PartyResponse])
async def list_parties(
    service: PartyService = Depends(get_party_service),
) -> list[dict[str, Any]]:
    """거래처 목록"""
    return service.list_parties()


@router.get(
    "/{party_id}",
    response_model=PartyResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_party(
    party_id: str,
    service: PartyService = Depends(get_party_service),
) -> Any:
    """거래처 조회"""
    party = service.get_party(party_id)
    if party is None:
        return JSONResponse(status_code=404, content={"error": "Party not found"})
    return party


@router.get("/{party_id}/ledger", response_model=LedgerPreviewResponse)
async def get_party_ledger(
    party_id: str,
    service: PartyService = Depends(get_party_service),
) -> dict[str, Any]:
    """거래처 원장 미리보기

    거래처가 없거나 원장 항목이 없으면 빈 entries.
    """
    return service.get_ledger_preview(party_id)
