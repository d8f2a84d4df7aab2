"""Infrastructure Layer — database, security and logging concerns.

Invariants:
    - Infrastructure never imports route modules
    - Library exceptions (SQLAlchemy, PyJWT) are mapped to core/errors.py types

Design Decisions:
    - Thin wrappers over raw libraries: routes depend on these, not on the libraries
"""
