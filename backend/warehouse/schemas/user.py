"""
Warehouse Backend — User Schemas
==================================

What:  Request and response models for /api/users.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """
    Body of POST /api/users.

    All three fields must be present; no further validation is applied.
    The password is hashed before it is stored.
    """
    username: str = Field(description="Unique login name")
    password: str = Field(description="Plaintext password (hashed server-side)")
    role: str = Field(description="Free-form role label, e.g. 'admin'")


class UserRead(BaseModel):
    """One entry of GET /api/users. ``password`` is the stored hash."""
    username: str
    password: str
    role: str

    model_config = {"from_attributes": True}
