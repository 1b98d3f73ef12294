"""Dependencies: FastAPI providers for process-wide collaborators on app.state.

Invariants:
    - Collaborators are built once in the lifespan (main.py), never per request
    - A missing collaborator is a startup bug and raises RuntimeError
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from favorites_api.config import Settings, get_settings
from favorites_api.core.repository_protocols import CatalogClient
from favorites_api.infrastructure.database import get_db


def get_catalog_client(request: Request) -> CatalogClient:
    """Return the shared catalog client from app.state."""
    client = getattr(request.app.state, "catalog_client", None)
    if client is None:
        raise RuntimeError("Catalog client not initialized. Check lifespan setup.")
    return client


DbDep = Annotated[AsyncSession, Depends(get_db)]
CatalogDep = Annotated[CatalogClient, Depends(get_catalog_client)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
