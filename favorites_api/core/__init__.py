"""Core Layer: pure domain logic and boundary contracts, no IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions in core/ are pure and deterministic
"""
