"""Database Infrastructure: SQLAlchemy declarative base.

Invariants:
    - Single async engine per store handle (owned by DatabaseSessionManager)
"""
