"""Products API Package - REST CRUD service for the Product resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
