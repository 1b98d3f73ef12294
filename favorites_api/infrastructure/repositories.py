"""SQLAlchemy Repositories: per-request persistence over one AsyncSession.

Invariants:
    - save() adds and flushes (ids assigned), never commits
    - Lookups are exact-match point queries, no caching
    - search() orders by id ascending, offset = limit * (page - 1)
    - get_with_relations() eagerly loads films and each film's characters
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import noload, selectinload

from favorites_api.core.domain_types import ListId
from favorites_api.models.character import Character
from favorites_api.models.favorite_list import FavoriteList
from favorites_api.models.film import Film


class SqlCharacterRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_name(self, name: str) -> Character | None:
        result = await self.db.execute(
            select(Character).where(Character.name == name).limit(1),
        )
        return result.scalar_one_or_none()

    async def save(self, character: Character) -> Character:
        self.db.add(character)
        await self.db.flush()
        return character


class SqlFilmRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_title(self, title: str) -> Film | None:
        result = await self.db.execute(
            select(Film).where(Film.title == title).limit(1),
        )
        return result.scalar_one_or_none()

    async def save(self, film: Film) -> Film:
        self.db.add(film)
        await self.db.flush()
        return film

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Film))
        return result.scalar_one()


class SqlFavoriteListRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, favorite_list: FavoriteList) -> FavoriteList:
        self.db.add(favorite_list)
        await self.db.flush()
        return favorite_list

    async def search(
        self, search: str | None, page: int, limit: int,
    ) -> Sequence[FavoriteList]:
        """Page through lists, optionally filtered by a name substring."""
        query = (
            select(FavoriteList)
            .options(noload(FavoriteList.films))
            .order_by(FavoriteList.id)
        )
        if search:
            query = query.where(
                FavoriteList.list_name.contains(search, autoescape=True),
            )
        query = query.limit(limit).offset(limit * (page - 1))
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get_with_relations(self, list_id: ListId) -> FavoriteList | None:
        result = await self.db.execute(
            select(FavoriteList)
            .where(FavoriteList.id == list_id)
            .options(
                selectinload(FavoriteList.films).selectinload(Film.characters),
            ),
        )
        return result.scalar_one_or_none()
