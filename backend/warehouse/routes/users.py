"""
Warehouse Backend — User Route Handlers
=========================================

What:  GET /api/users (list) and POST /api/users (create, duplicate = no-op).
How:   Delegates to UserService; errors surface through the global handlers.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.database import get_db_session
from warehouse.schemas.common import ErrorResponse, SuccessResponse
from warehouse.schemas.user import UserCreate, UserRead
from warehouse.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserRead],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List users",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserRead]:
    return await user_service.list_users(db)


@router.post(
    "/users",
    response_model=SuccessResponse,
    responses={
        400: {"description": "Missing field", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a user",
    description=(
        "Stores a user with a hashed password. Posting a username that already "
        "exists leaves the existing row untouched and still reports success."
    ),
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    return await user_service.create_user(db, payload)
