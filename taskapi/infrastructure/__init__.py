"""Infrastructure — database session management and logging.

Invariants:
    - Everything that touches the driver or the process-wide logger lives here
"""
