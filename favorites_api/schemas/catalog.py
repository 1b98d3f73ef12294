"""Catalog Schemas: typed shapes of the external film catalog responses.

Invariants:
    - CatalogFilm requires title, release_date and characters (list of URLs)
    - CatalogCharacter requires name
    - Unknown fields are ignored; a missing or mistyped field fails validation
"""

from pydantic import BaseModel, ConfigDict


class CatalogFilm(BaseModel):
    """Film metadata as returned by GET /films/{id}/."""
    model_config = ConfigDict(extra="ignore")

    title: str
    release_date: str
    characters: list[str]


class CatalogCharacter(BaseModel):
    """Character detail as returned by a character URL."""
    model_config = ConfigDict(extra="ignore")

    name: str
