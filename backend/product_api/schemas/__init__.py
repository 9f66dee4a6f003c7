"""Pydantic Schemas - typed request shapes and response envelopes.

Invariants:
    - Schemas are API contracts, models are persistence; they are never mixed
"""
