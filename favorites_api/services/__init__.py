"""Services Layer: list creation, list queries, and workbook export.

Invariants:
    - Services receive their collaborators (session, catalog client) explicitly
    - Commit decisions are made here, never in repositories
"""
