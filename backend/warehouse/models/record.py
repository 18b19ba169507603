"""
Warehouse Backend — JSON Record Models
========================================

What:  ORM models for the `schedule`, `shipment` and `miscellaneous` tables.
How:   The three tables are structurally identical, so the columns live on an
       abstract ``Record`` base and each concrete class only names its table.

Table layout (per table):
    id          SERIAL PRIMARY KEY
    data        JSONB                  -- opaque, schema-less payload
    created_at  TIMESTAMP DEFAULT NOW()

On PostgreSQL ``data`` is JSONB; other dialects (SQLite in tests) fall back
to the generic JSON type.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, TIMESTAMP, Integer, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from warehouse.database import Base

JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class Record:
    """
    Columns shared by every JSON record table (declarative mixin).

    Rows are immutable once inserted. ``created_at`` is assigned by the
    database at insert time and drives listing order.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    data: Mapped[Any] = mapped_column(JSONDocument, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=False),
        server_default=func.now(),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, created_at='{self.created_at}')>"


class Schedule(Record, Base):
    __tablename__ = "schedule"


class Shipment(Record, Base):
    __tablename__ = "shipment"


class Miscellaneous(Record, Base):
    __tablename__ = "miscellaneous"

