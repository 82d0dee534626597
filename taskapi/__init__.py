"""Task API — users and their tasks over a relational store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
