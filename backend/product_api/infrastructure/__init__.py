"""Infrastructure Layer - database access, repositories and observability.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy exceptions are mapped to DatabaseError before leaving this layer
"""
