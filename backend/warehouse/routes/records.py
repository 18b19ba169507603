"""
Warehouse Backend — JSON Record Route Handlers
================================================

What:  List/insert endpoints for the schedule, shipment and miscellaneous
       tables.
How:   Every handler is a one-line delegation to RecordService with the
       table's model.

Response shapes:
    GET  /api/schedule, /api/shipment, /api/miscellaneous
         → [{id, data, created_at}, ...] newest first
    POST /api/schedule, /api/shipment
         → the inserted row {id, data, created_at}
    POST /api/miscellaneous/save
         → {"success": true}
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.database import get_db_session
from warehouse.models.record import Miscellaneous, Schedule, Shipment
from warehouse.schemas.common import ErrorResponse, SuccessResponse
from warehouse.schemas.record import RecordCreate, RecordRead
from warehouse.services.record_service import record_service

router = APIRouter(prefix="/api", tags=["Records"])

_READ_RESPONSES = {500: {"description": "Server error", "model": ErrorResponse}}
_WRITE_RESPONSES = {
    400: {"description": "Missing 'data'", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


# ── Schedule ──────────────────────────────────────────────────────────────

@router.get(
    "/schedule",
    response_model=List[RecordRead],
    responses=_READ_RESPONSES,
    summary="List schedule entries, newest first",
)
async def list_schedule(db: AsyncSession = Depends(get_db_session)) -> List[RecordRead]:
    return await record_service.list_records(db, Schedule)


@router.post(
    "/schedule",
    response_model=RecordRead,
    responses=_WRITE_RESPONSES,
    summary="Add a schedule entry",
)
async def add_schedule(
    payload: RecordCreate,
    db: AsyncSession = Depends(get_db_session),
) -> RecordRead:
    return await record_service.create_record(db, Schedule, payload.data)


# ── Shipment ──────────────────────────────────────────────────────────────

@router.get(
    "/shipment",
    response_model=List[RecordRead],
    responses=_READ_RESPONSES,
    summary="List shipment entries, newest first",
)
async def list_shipment(db: AsyncSession = Depends(get_db_session)) -> List[RecordRead]:
    return await record_service.list_records(db, Shipment)


@router.post(
    "/shipment",
    response_model=RecordRead,
    responses=_WRITE_RESPONSES,
    summary="Add a shipment entry",
)
async def add_shipment(
    payload: RecordCreate,
    db: AsyncSession = Depends(get_db_session),
) -> RecordRead:
    return await record_service.create_record(db, Shipment, payload.data)


# ── Miscellaneous ─────────────────────────────────────────────────────────

@router.get(
    "/miscellaneous",
    response_model=List[RecordRead],
    responses=_READ_RESPONSES,
    summary="List miscellaneous entries, newest first",
)
async def list_miscellaneous(
    db: AsyncSession = Depends(get_db_session),
) -> List[RecordRead]:
    return await record_service.list_records(db, Miscellaneous)


@router.post(
    "/miscellaneous/save",
    response_model=SuccessResponse,
    responses=_WRITE_RESPONSES,
    summary="Save a miscellaneous entry",
)
async def save_miscellaneous(
    payload: RecordCreate,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    return await record_service.save_record(db, Miscellaneous, payload.data)
