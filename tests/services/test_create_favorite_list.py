"""FavoriteListCreator: service-level commit behavior.

Tests cover:
    - Non-atomic mode commits each film before the next id is resolved
    - Atomic mode leaves nothing behind on failure
    - Atomic mode commits everything on success
"""

import pytest

from favorites_api.core.errors import FilmNotFoundError
from favorites_api.models import Character, FavoriteList, Film
from favorites_api.services.create_favorite_list import FavoriteListCreator


async def test_non_atomic_keeps_films_resolved_before_failure(
    test_db, catalog, count_rows,
):
    creator = FavoriteListCreator(test_db, catalog)

    with pytest.raises(FilmNotFoundError) as exc_info:
        await creator.create("Partial", [1, 2, 99])

    assert exc_info.value.film_id == 99
    assert await count_rows(Film) == 2
    assert await count_rows(Character) == 3
    assert await count_rows(FavoriteList) == 0


async def test_atomic_rolls_back_everything_on_failure(
    test_db, catalog, count_rows,
):
    creator = FavoriteListCreator(test_db, catalog, atomic=True)

    with pytest.raises(FilmNotFoundError):
        await creator.create("All or nothing", [1, 2, 99])

    assert await count_rows(Film) == 0
    assert await count_rows(Character) == 0


async def test_atomic_success_persists_list(test_db, catalog, count_rows):
    creator = FavoriteListCreator(test_db, catalog, atomic=True)

    favorite_list = await creator.create("Atomic", [1, 2])

    assert favorite_list.id is not None
    assert [f.title for f in favorite_list.films] == [
        "A New Hope", "The Empire Strikes Back",
    ]
    assert await count_rows(FavoriteList) == 1
    assert await count_rows(Character) == 3


async def test_character_repeated_within_a_film_is_created_once(
    test_db, catalog, count_rows,
):
    luke = "https://swapi.test/api/people/1/"
    catalog.films[7] = {
        "title": "Double Luke",
        "release_date": "2000-01-01",
        "characters": [luke, luke],
    }

    favorite_list = await FavoriteListCreator(test_db, catalog).create("Echo", [7])

    cast = favorite_list.films[0].characters
    assert len(cast) == 2
    assert cast[0] is cast[1]
    assert await count_rows(Character) == 1
