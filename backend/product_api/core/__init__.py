"""Core Layer - pure request rules, domain types and the error hierarchy.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
