"""List Creation: resolves catalog film ids into Film/Character rows and
persists a new FavoriteList aggregating them.

Invariants:
    - Film ids processed strictly in input order; films keep that order in the list
    - Film reused by exact title; its characters are not re-resolved
    - Character reused by exact name, else created, in the film's URL order
    - A new FavoriteList on every call (names are not deduplicated)
    - A catalog failure raises FilmNotFoundError and no list is saved

Design Decisions:
    - Non-atomic by default: every save commits on its own, so Films and
      Characters created before a failing film id stay persisted
    - atomic=True flushes only and commits once at the end; any failure
      rolls back everything the call created
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from favorites_api.core.domain_types import CatalogFilmId
from favorites_api.core.repository_protocols import (
    CatalogClient,
    CharacterRepository,
    FavoriteListRepository,
    FilmRepository,
)
from favorites_api.infrastructure.repositories import (
    SqlCharacterRepository,
    SqlFavoriteListRepository,
    SqlFilmRepository,
)
from favorites_api.models.character import Character
from favorites_api.models.favorite_list import FavoriteList
from favorites_api.models.film import Film
from favorites_api.schemas.catalog import CatalogFilm

logger = logging.getLogger(__name__)


class FavoriteListCreator:
    """Builds a favorite list from catalog film ids."""

    def __init__(
        self,
        db: AsyncSession,
        catalog: CatalogClient,
        atomic: bool = False,
        characters: CharacterRepository | None = None,
        films: FilmRepository | None = None,
        lists: FavoriteListRepository | None = None,
    ):
        self.db = db
        self.catalog = catalog
        self.atomic = atomic
        self.characters = characters or SqlCharacterRepository(db)
        self.films = films or SqlFilmRepository(db)
        self.lists = lists or SqlFavoriteListRepository(db)

    async def create(
        self, list_name: str, film_ids: Sequence[CatalogFilmId],
    ) -> FavoriteList:
        """Resolve every film id, then save the list. Raises FilmNotFoundError."""
        try:
            resolved: list[Film] = []
            for film_id in film_ids:
                resolved.append(await self._resolve_film(film_id))

            favorite_list = FavoriteList(list_name=list_name, films=resolved)
            await self.lists.save(favorite_list)
            await self.db.commit()
        except Exception:
            if self.atomic:
                await self.db.rollback()
            raise

        logger.info(
            f"Favorite list created: {list_name!r}",
            extra={"list_id": favorite_list.id, "film_count": len(resolved)},
        )
        return favorite_list

    async def _resolve_film(self, film_id: CatalogFilmId) -> Film:
        """Reuse the stored film with the catalog title, or build it with its cast."""
        catalog_film = await self.catalog.fetch_film(film_id)

        existing = await self.films.find_by_title(catalog_film.title)
        if existing is not None:
            return existing

        cast = await self._resolve_characters(catalog_film, film_id)
        film = Film(
            title=catalog_film.title,
            release_date=catalog_film.release_date,
            characters=cast,
        )
        await self.films.save(film)
        await self._checkpoint()
        logger.info(
            f"Film stored: {film.title!r} ({len(cast)} characters)",
            extra={"film_id": film_id},
        )
        return film

    async def _resolve_characters(
        self, catalog_film: CatalogFilm, film_id: CatalogFilmId,
    ) -> list[Character]:
        cast: list[Character] = []
        for url in catalog_film.characters:
            raw = await self.catalog.fetch_character(url, film_id)
            character = await self.characters.find_by_name(raw.name)
            if character is None:
                character = Character(name=raw.name)
                await self.characters.save(character)
                await self._checkpoint()
            cast.append(character)
        return cast

    async def _checkpoint(self) -> None:
        # atomic mode defers to the single commit in create()
        if not self.atomic:
            await self.db.commit()
