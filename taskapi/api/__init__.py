"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All resource endpoints answer with the {"message", "payload"} envelope

Design Decisions:
    - Thin routes delegate to controllers
"""
