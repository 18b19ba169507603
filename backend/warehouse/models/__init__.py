"""
ORM models for the four record categories.

Importing this package registers every table on ``Base.metadata``.
"""

from warehouse.models.record import Miscellaneous, Record, Schedule, Shipment
from warehouse.models.user import User

__all__ = ["User", "Record", "Schedule", "Shipment", "Miscellaneous"]
