"""Catalog Client: read-only async client for the external film catalog (SWAPI).

Invariants:
    - GET {base_url}/films/{id}/ → CatalogFilm; GET <character url> → CatalogCharacter
    - Any failure (transport error, non-2xx, non-JSON or null body, shape
      mismatch) raises FilmNotFoundError for the film being resolved
    - No retries; a single timeout applies to every call
    - Redirects followed (SWAPI redirects URLs missing a trailing slash)

Design Decisions:
    - One shared httpx.AsyncClient per process, created lazily, closed on shutdown
    - Payloads parsed into pydantic models so the rest of the code never sees raw JSON
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from favorites_api.core.domain_types import CatalogFilmId
from favorites_api.core.errors import FilmNotFoundError
from favorites_api.schemas.catalog import CatalogCharacter, CatalogFilm

logger = logging.getLogger(__name__)


class SwapiCatalogClient:
    """httpx implementation of the CatalogClient protocol."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout, follow_redirects=True,
            )
        return self._client

    def film_url(self, film_id: CatalogFilmId) -> str:
        return f"{self.base_url}/films/{film_id}/"

    async def fetch_film(self, film_id: CatalogFilmId) -> CatalogFilm:
        """Fetch film metadata by catalog id."""
        payload = await self._get_json(self.film_url(film_id), film_id)
        try:
            return CatalogFilm.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                f"Catalog film payload rejected: {e.error_count()} error(s)",
                extra={"film_id": film_id},
            )
            raise FilmNotFoundError(film_id)

    async def fetch_character(
        self, url: str, film_id: CatalogFilmId | None = None,
    ) -> CatalogCharacter:
        """Fetch one character by the absolute URL listed on its film."""
        payload = await self._get_json(url, film_id)
        try:
            return CatalogCharacter.model_validate(payload)
        except ValidationError:
            logger.warning(
                f"Catalog character payload rejected: {url}",
                extra={"film_id": film_id},
            )
            raise FilmNotFoundError(film_id)

    async def _get_json(self, url: str, film_id: CatalogFilmId | None) -> Any:
        try:
            response = await self.client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Catalog returned {e.response.status_code} for {url}",
                extra={"film_id": film_id},
            )
            raise FilmNotFoundError(film_id)
        except httpx.HTTPError as e:
            logger.warning(
                f"Catalog request failed for {url}: {e!r}",
                extra={"film_id": film_id},
            )
            raise FilmNotFoundError(film_id)
        except ValueError:
            logger.warning(
                f"Catalog returned a non-JSON body for {url}",
                extra={"film_id": film_id},
            )
            raise FilmNotFoundError(film_id)
        if not payload:
            raise FilmNotFoundError(film_id)
        return payload

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
