"""Match tracker API endpoints."""

import logging

from fastapi import APIRouter

from api.records import get_match_store, new_record
from api.schemas import MatchCreateRequest, MatchRecordResponse, MatchReportResponse

logger = logging.getLogger(__name__)

router = APIRouter()

WIN_RESULT = "Win"


@router.post("")
async def create_match(request: MatchCreateRequest) -> MatchRecordResponse:
    """Record a finished match."""
    store = await get_match_store()
    record = await store.insert(
        new_record(request.hero_name, request.role, request.result)
    )
    logger.info(
        "Recorded match %s: %s (%s) %s",
        record["id"],
        record["hero_name"],
        record["role"],
        record["result"],
    )
    return MatchRecordResponse(**record)


@router.get("")
async def list_matches() -> list[MatchRecordResponse]:
    """List all matches, newest first."""
    store = await get_match_store()
    return [MatchRecordResponse(**r) for r in await store.newest_first()]


@router.get("/report")
async def match_report() -> MatchReportResponse:
    """Summarize tracked matches."""
    store = await get_match_store()
    records = await store.all()
    return MatchReportResponse(
        total_matches=len(records),
        total_wins=sum(1 for r in records if r["result"] == WIN_RESULT),
    )
