"""API Layer - FastAPI routes, request-rule dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON envelopes: {"data": ...}, {"error": ...} or {"errors": [...]}
"""
