"""
Warehouse Backend — User SQLAlchemy Model
==========================================

What:  ORM model representing the `users` table.
Who:   Used by UserService for inserts/listing and by ``init_schema``.

Table layout (part of the external contract, created verbatim on startup):
    id        SERIAL PRIMARY KEY
    username  TEXT UNIQUE NOT NULL
    password  TEXT NOT NULL      -- argon2 hash, never plaintext
    role      TEXT NOT NULL
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from warehouse.database import Base


class User(Base):
    """
    A warehouse user account.

    Lifecycle:
        Created by POST /api/users. A second insert with the same username
        is ignored by the database (``ON CONFLICT (username) DO NOTHING``).
        Never updated or deleted through the API.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)

    # Holds the passlib hash string; the column name is kept for compatibility
    password: Mapped[str] = mapped_column(Text, nullable=False)

    role: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
