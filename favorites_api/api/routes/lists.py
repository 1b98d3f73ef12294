"""Favorite Lists: create, search, detail and spreadsheet export routes.

Invariants:
    - POST returns 201 with {"list": ...}; GET collection returns {"lists": [{id, name}]}
    - Detail and export share get_list_or_404 (same 404 body)
    - Export responds with raw xlsx bytes as an attachment, not JSON
"""

import logging

from fastapi import APIRouter, Query, Response, status

from favorites_api.api.dependencies import CatalogDep, DbDep, SettingsDep
from favorites_api.core.domain_types import CatalogFilmId, ListId
from favorites_api.core.export_table import build_character_table
from favorites_api.schemas.favorite_list import (
    FavoriteListCreate,
    FavoriteListRead,
)
from favorites_api.services.create_favorite_list import FavoriteListCreator
from favorites_api.services.export_workbook import (
    XLSX_MEDIA_TYPE,
    content_disposition,
    export_filename,
    render_workbook,
)
from favorites_api.services.list_queries import get_list_or_404, search_lists

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/lists", tags=["lists"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_list(
    body: FavoriteListCreate,
    db: DbDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    """Create a favorite list from catalog film ids."""
    creator = FavoriteListCreator(
        db, catalog, atomic=settings.atomic_list_creation,
    )
    favorite_list = await creator.create(
        body.list_name, [CatalogFilmId(f) for f in body.films],
    )
    return {
        "list": FavoriteListRead.model_validate(favorite_list).model_dump(
            by_alias=True,
        ),
    }


@router.get("")
async def list_lists(
    db: DbDep,
    settings: SettingsDep,
    search: str | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
):
    """Search saved lists with pagination."""
    limit = limit or settings.default_page_limit
    lists = await search_lists(db, search, page, limit)
    return {"lists": [summary.model_dump() for summary in lists]}


@router.get("/{list_id}")
async def get_list(list_id: int, db: DbDep):
    """Get one list with films and characters expanded."""
    favorite_list = await get_list_or_404(db, ListId(list_id))
    return {
        "list": FavoriteListRead.model_validate(favorite_list).model_dump(
            by_alias=True,
        ),
    }


@router.get("/{list_id}/file")
async def download_list_file(list_id: int, db: DbDep):
    """Export the list as a Character → Movies spreadsheet."""
    favorite_list = await get_list_or_404(db, ListId(list_id))
    rows = build_character_table(favorite_list.films)
    filename = export_filename()
    logger.info(
        f"Exporting {len(rows)} character rows as {filename}",
        extra={"list_id": list_id},
    )
    return Response(
        content=render_workbook(rows),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(filename)},
    )
