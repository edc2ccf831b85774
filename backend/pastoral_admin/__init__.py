"""
Pastoral Admin Backend — Application Package Initializer
=========================================================

What: Marks the `pastoral_admin` directory as a Python package.
Who:  Imported by uvicorn, Alembic and pytest.

Architecture Note:
    The backend is split into four layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Rules)   │  ← existence / uniqueness guards
    ├─────────────────────────────────────┤
    │      Repositories (Persistence)     │  ← parameterized SQL per entity
    ├─────────────────────────────────────┤
    │   Database (Engine, Unit of Work)   │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes handle status codes and headers and delegate to services.
    Services classify every persistence failure into a domain error.
    Repositories translate entity operations into statements and map
    "no rows" to the entity's not-found error.
"""

__version__ = "1.0.0"
