"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Single async engine per process (owned by infrastructure/database.py)
"""
