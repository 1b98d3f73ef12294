"""Infrastructure Layer: database sessions, repositories, the external
catalog client, and logging setup.

Invariants:
    - All IO lives here (or in routes); core/ stays pure
"""
