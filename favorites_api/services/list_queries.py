"""List Queries: paginated search and full detail lookup for favorite lists.

Invariants:
    - search_lists returns {id, name} projections only, ordered by id
    - An empty page is a valid result, never an error
    - get_list_or_404 raises ListNotFoundError when the id has no row
"""

from sqlalchemy.ext.asyncio import AsyncSession

from favorites_api.core.domain_types import ListId
from favorites_api.core.errors import ListNotFoundError
from favorites_api.infrastructure.repositories import SqlFavoriteListRepository
from favorites_api.models.favorite_list import FavoriteList
from favorites_api.schemas.favorite_list import FavoriteListSummary


async def search_lists(
    db: AsyncSession, search: str | None, page: int, limit: int,
) -> list[FavoriteListSummary]:
    """Page through saved lists, optionally filtered by name substring."""
    lists = await SqlFavoriteListRepository(db).search(search, page, limit)
    return [FavoriteListSummary(id=lst.id, name=lst.list_name) for lst in lists]


async def get_list_or_404(db: AsyncSession, list_id: ListId) -> FavoriteList:
    """Load a list with films and characters expanded, or raise 404."""
    favorite_list = await SqlFavoriteListRepository(db).get_with_relations(list_id)
    if favorite_list is None:
        raise ListNotFoundError(list_id)
    return favorite_list
