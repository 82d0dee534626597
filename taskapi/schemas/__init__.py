"""Pydantic Schemas — request validation rules and response envelopes.

Invariants:
    - Request models are the per-route validation rules; they run before any controller
    - Response models serialize timestamps as createdAt/updatedAt

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
