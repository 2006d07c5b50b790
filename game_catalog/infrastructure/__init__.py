"""Infrastructure Layer — database sessions, logging, and credential handling.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Library failures are mapped to core.errors types at this boundary

Design Decisions:
    - Thin wrappers over SQLAlchemy, PyJWT and bcrypt: one module per concern
"""
