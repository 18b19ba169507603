"""
Warehouse Backend — Application Package
=========================================

JSON-over-HTTP storage for warehouse users, schedules, shipments and
miscellaneous records, backed by PostgreSQL.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (one statement each)   │  ← error translation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine, bootstrap
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
