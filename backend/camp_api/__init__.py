"""
Camp API Backend: Application Package
======================================

What: Read-only JSON API exposing campground records under versioned paths.
Who:  Imported by uvicorn (camp_api.main:app), Alembic, the seed command and pytest.

Layering:

    ┌─────────────────────────────────────┐
    │   Routes (versioned API routers)    │  ← built from the registry
    ├─────────────────────────────────────┤
    │   Registry + Serializers            │  ← what is exposed, and how
    ├─────────────────────────────────────┤
    │   Services (fetch-all)              │
    ├─────────────────────────────────────┤
    │   Models (SQLAlchemy) / Database    │
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
