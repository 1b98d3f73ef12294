"""Boundary Protocols: contracts between core/services and the persistence shell.

Invariants:
    - Services depend on these Protocols, never on a concrete repository class
    - save() stages and flushes; committing is the caller's decision

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - The catalog client is a boundary too: services only see CatalogClient
"""

from typing import Protocol, Sequence

from favorites_api.core.domain_types import CatalogFilmId, ListId
from favorites_api.models.character import Character
from favorites_api.models.favorite_list import FavoriteList
from favorites_api.models.film import Film
from favorites_api.schemas.catalog import CatalogCharacter, CatalogFilm


class CharacterRepository(Protocol):
    """Contract for character persistence."""
    async def find_by_name(self, name: str) -> Character | None: ...
    async def save(self, character: Character) -> Character: ...


class FilmRepository(Protocol):
    """Contract for film persistence."""
    async def find_by_title(self, title: str) -> Film | None: ...
    async def save(self, film: Film) -> Film: ...
    async def count(self) -> int: ...


class FavoriteListRepository(Protocol):
    """Contract for favorite list persistence."""
    async def save(self, favorite_list: FavoriteList) -> FavoriteList: ...
    async def search(
        self, search: str | None, page: int, limit: int,
    ) -> Sequence[FavoriteList]: ...
    async def get_with_relations(self, list_id: ListId) -> FavoriteList | None: ...


class CatalogClient(Protocol):
    """Contract for the read-only external film catalog."""
    async def fetch_film(self, film_id: CatalogFilmId) -> CatalogFilm: ...
    async def fetch_character(
        self, url: str, film_id: CatalogFilmId | None = None,
    ) -> CatalogCharacter: ...
