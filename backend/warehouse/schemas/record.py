"""
Warehouse Backend — JSON Record Schemas
=========================================

What:  Request and response models shared by the schedule, shipment and
       miscellaneous endpoints.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class RecordCreate(BaseModel):
    """
    Body of the record insert endpoints.

    ``data`` is any JSON document. It is optional at the schema level so that
    an absent value reaches the service, which answers with a 400 and the
    "Missing 'data'" message instead of FastAPI's generic validation error.
    """
    data: Any = Field(default=None, description="Arbitrary JSON payload")


class RecordRead(BaseModel):
    """A stored row: generated id, the payload, and the insertion timestamp."""
    id: int = Field(description="Generated row id")
    data: Any = Field(default=None, description="Stored JSON payload")
    created_at: Optional[datetime] = Field(default=None, description="Insertion time")

    model_config = {"from_attributes": True}
