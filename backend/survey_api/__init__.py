"""
Survey API Backend: Application Package Initializer
=====================================================

What: Marks the `survey_api` directory as a Python package.
Why:  Enables module imports like `from survey_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a thin handler layer over a document-style database:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (one per collection)   │  ← One persistence round trip per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy documents + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine injected per request
    └─────────────────────────────────────┘

    Collections: surveys, survey_responses, users, feedbacks.
"""

__version__ = "1.0.0"
