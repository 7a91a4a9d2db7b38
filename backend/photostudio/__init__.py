"""
PhotoStudio Backend — Application Package Initializer
======================================================

What: Marks the `photostudio` directory as a Python package.
Who:  Imported by uvicorn (`photostudio.main:app`), Alembic, and pytest.

Architecture Note:
    The backend of the photography site follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├──────────────────┬──────────────────┤
    │  Storage Access  │   Integrations   │  ← repositories / image host, email
    ├──────────────────┴──────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine + pool
    └─────────────────────────────────────┘

    Route handlers validate input, call exactly one storage operation (or one
    integration), and map the result or error to an HTTP response.
"""

__version__ = "1.0.0"
