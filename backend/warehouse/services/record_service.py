"""
Warehouse Backend — JSON Record Service
=========================================

What:  List/insert operations shared by the schedule, shipment and
       miscellaneous tables.
How:   Every method takes the ORM model of the target table, so one service
       serves all three record categories. Each call issues exactly one
       SQL statement.
Who:   Called by the route handlers in routes/records.py.

Operations:
    list_records()   SELECT * FROM <table> ORDER BY created_at DESC, id DESC
    create_record()  INSERT INTO <table> (data) VALUES (:data) RETURNING *
    save_record()    INSERT INTO <table> (data) VALUES (:data)

Both inserts reject an absent or null ``data`` with ValidationError (400)
before touching the database, and commit before returning so that a failed
commit surfaces as DatabaseError (500) rather than a success body.
"""

import logging
from typing import Any, List, Type

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.exceptions import DatabaseError, ValidationError
from warehouse.models.record import Record
from warehouse.schemas.common import SuccessResponse
from warehouse.schemas.record import RecordRead

logger = logging.getLogger(__name__)

MISSING_DATA_MESSAGE = "Missing 'data' in request body"


def _require_data(data: Any) -> None:
    if data is None:
        raise ValidationError(message=MISSING_DATA_MESSAGE, field="data")


class RecordService:
    """
    Stateless service for the JSON record tables.

    Error Handling Strategy:
        Statement failures are logged with traceback and wrapped in
        DatabaseError whose message names the table ("Failed to add
        shipment"). Nothing from the driver error reaches the client.
    """

    async def list_records(self, db: AsyncSession, model: Type[Record]) -> List[RecordRead]:
        """
        Return all rows of ``model``'s table, newest first.

        Rows sharing a ``created_at`` value are ordered by id, newest first.
        """
        table = model.__tablename__
        try:
            result = await db.execute(
                select(model).order_by(model.created_at.desc(), model.id.desc())
            )
            records = result.scalars().all()
        except Exception as e:
            logger.error("Error fetching %s: %s", table, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Failed to fetch {table}",
                context={"table": table, "error_type": type(e).__name__},
            )

        return [RecordRead.model_validate(record) for record in records]

    async def create_record(
        self, db: AsyncSession, model: Type[Record], data: Any
    ) -> RecordRead:
        """
        Insert one row and return it with its generated id and timestamp.

        Raises:
            ValidationError: ``data`` is absent or null (→ 400)
            DatabaseError: the insert or its commit failed (→ 500)
        """
        _require_data(data)
        table = model.__tablename__
        try:
            result = await db.execute(
                insert(model).values(data=data).returning(model)
            )
            record = result.scalar_one()
            await db.commit()
        except Exception as e:
            logger.error("Error adding %s: %s", table, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Failed to add {table}",
                context={"table": table, "error_type": type(e).__name__},
            )

        logger.info("%s row %s created", table, record.id)
        return RecordRead.model_validate(record)

    async def save_record(
        self, db: AsyncSession, model: Type[Record], data: Any
    ) -> SuccessResponse:
        """
        Insert one row and acknowledge without echoing it.

        Raises:
            ValidationError: ``data`` is absent or null (→ 400)
            DatabaseError: the insert or its commit failed (→ 500)
        """
        _require_data(data)
        table = model.__tablename__
        try:
            await db.execute(insert(model).values(data=data))
            await db.commit()
        except Exception as e:
            logger.error("Error saving %s: %s", table, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Failed to save {table}",
                context={"table": table, "error_type": type(e).__name__},
            )

        logger.info("%s row saved", table)
        return SuccessResponse()


record_service = RecordService()
