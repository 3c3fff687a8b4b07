"""
Chirper Backend — Application Package Initializer
==================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into thin layers, each depending only on the ones below:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   RequestHandler (Business Rules)   │  ← Validation, outcome mapping
    ├─────────────────────────────────────┤
    │     Gateways (Store Translation)    │  ← Domain query → SQL, None for absent
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the session directly, and gateways never decide whether
    a missing row is an error; that call belongs to the RequestHandler.
"""

__version__ = "1.0.0"
