"""Favorite List Schemas: request body and response projections for /lists.

Invariants:
    - FavoriteListCreate accepts "listName" and an ordered list of catalog film ids
    - Read models are built from ORM objects (from_attributes) and dumped by alias
    - FavoriteListSummary is the search projection: {id, name} only
"""

from pydantic import BaseModel, ConfigDict, Field


class FavoriteListCreate(BaseModel):
    """List creation body: a name and the catalog ids of its films."""
    model_config = ConfigDict(populate_by_name=True)

    list_name: str = Field(alias="listName")
    films: list[int]


class CharacterRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class FilmRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    release_date: str = Field(serialization_alias="releaseDate")
    characters: list[CharacterRead] = []


class FavoriteListRead(BaseModel):
    """Full list: films and their characters expanded."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    list_name: str = Field(serialization_alias="listName")
    films: list[FilmRead] = []


class FavoriteListSummary(BaseModel):
    """Search projection."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
