"""
Noteful API — Application Package Initializer
==============================================

What: Marks the `noteful` directory as a Python package.
Who:  Imported by uvicorn (`noteful.main:app`), Alembic and pytest.

Architecture Note:
    The backend is layered, with one request pipeline shared by both resources:

    ┌─────────────────────────────────────┐
    │     Middleware (AuthGate at edge)   │  ← Bearer token, request ID, logging
    ├─────────────────────────────────────┤
    │   Routes + Pipeline stages          │  ← Body/path validation, short-circuits
    ├─────────────────────────────────────┤
    │   Services + Serializers            │  ← Domain records, output escaping
    ├─────────────────────────────────────┤
    │   ResourceStore (Persistence)       │  ← Async SQLAlchemy table access
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
