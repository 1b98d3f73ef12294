"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py
    - Routes delegate to services; no persistence logic in handlers
"""
