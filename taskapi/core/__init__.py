"""Core Layer — error taxonomy and identifier rules, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, controllers/, infrastructure/, or db/
"""
