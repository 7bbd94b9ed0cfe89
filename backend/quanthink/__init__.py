"""
QuanThink Backend: Application Package
======================================

What: REST API behind the QuanThink web client (calculations and users).
Who:  Imported by uvicorn (`quanthink.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is layered; each layer only talks to the one below it.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← verbs, paths, status codes
    ├─────────────────────────────────────┤
    │         Services (Business Rules)   │  ← email uniqueness, credentials
    ├─────────────────────────────────────┤
    │        Stores (Entity Persistence)  │  ← one per entity, keyed by id
    ├─────────────────────────────────────┤
    │     Models & Database (SQLAlchemy)  │  ← async sessions, ORM tables
    └─────────────────────────────────────┘

    Services are built per request around a store that owns the
    request's session, so nothing is shared between requests.
"""

__version__ = "1.0.0"
