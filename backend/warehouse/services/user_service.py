"""
Warehouse Backend — User Service
==================================

What:  Listing and creation of user accounts.
How:   One SQL statement per operation, executed on the request's session.
Who:   Called by the /api/users route handlers.

Duplicate usernames:
    Inserts use ``INSERT ... ON CONFLICT (username) DO NOTHING``, so posting
    an existing username neither overwrites the row nor fails the request.
    The statement is built with the dialect-specific ``insert`` construct of
    the bound engine (PostgreSQL in production, SQLite in tests).
"""

import asyncio
import logging
from typing import Callable, Dict, List

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.exceptions import DatabaseError
from warehouse.models.user import User
from warehouse.schemas.common import SuccessResponse
from warehouse.schemas.user import UserCreate, UserRead
from warehouse.security import hash_password

logger = logging.getLogger(__name__)

# Dialects whose insert() supports on_conflict_do_nothing
_CONFLICT_AWARE_INSERTS: Dict[str, Callable] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UserService:
    """
    Business logic layer for user operations.

    Error Handling Strategy:
        Any failure while executing a statement is logged with its traceback
        and re-raised as DatabaseError carrying a generic message.
    """

    async def list_users(self, db: AsyncSession) -> List[UserRead]:
        """
        Return every user as ``{username, password, role}``.

        No ordering is guaranteed. ``password`` is the stored hash.
        """
        try:
            result = await db.execute(select(User.username, User.password, User.role))
            rows = result.all()
        except Exception as e:
            logger.error("Error fetching users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch users",
                context={"error_type": type(e).__name__},
            )

        return [
            UserRead(username=row.username, password=row.password, role=row.role)
            for row in rows
        ]

    async def create_user(self, db: AsyncSession, payload: UserCreate) -> SuccessResponse:
        """
        Insert a user unless the username is already taken.

        Returns success in both cases. The password is hashed in a worker
        thread first (argon2 is CPU-bound).
        """
        hashed = await asyncio.to_thread(hash_password, payload.password)
        try:
            dialect = db.get_bind().dialect.name
            insert = _CONFLICT_AWARE_INSERTS[dialect]
            stmt = (
                insert(User)
                .values(username=payload.username, password=hashed, role=payload.role)
                .on_conflict_do_nothing(index_elements=[User.username])
            )
            result = await db.execute(stmt)
            await db.commit()
        except Exception as e:
            logger.error("Error adding user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to add user",
                context={"username": payload.username, "error_type": type(e).__name__},
            )

        if result.rowcount == 0:
            logger.info("User '%s' already exists; insert skipped", payload.username)
        else:
            logger.info("User '%s' created with role '%s'", payload.username, payload.role)
        return SuccessResponse()


user_service = UserService()
