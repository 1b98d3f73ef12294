"""Pydantic Schemas: request/response validation for API endpoints and
the external catalog payloads.

Invariants:
    - Schemas validate at system boundaries (user input, catalog JSON, API responses)
    - Wire field names are camelCase (listName, releaseDate); Python names are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
