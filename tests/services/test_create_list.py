"""List Creation route: POST /api/v1/lists.

Tests cover:
    - 201 with the nested list for a single film
    - Film rows reused by title across requests
    - Character rows shared between films
    - 404 "film not found" keeps earlier films/characters (partial commit)
    - Atomic mode rolls everything back on 404
    - Invalid bodies rejected with 400
"""

from favorites_api.config import Settings, get_settings
from favorites_api.main import app
from favorites_api.models import Character, FavoriteList, Film


async def test_create_list_returns_201_with_nested_film_and_characters(
    client, count_rows,
):
    res = await client.post(
        "/api/v1/lists", json={"listName": "My List", "films": [1]},
    )

    assert res.status_code == 201
    body = res.json()["list"]
    assert body["listName"] == "My List"
    assert isinstance(body["id"], int)
    assert len(body["films"]) == 1
    film = body["films"][0]
    assert film["title"] == "A New Hope"
    assert film["releaseDate"] == "1977-05-25"
    assert [c["name"] for c in film["characters"]] == [
        "Luke Skywalker", "Leia Organa",
    ]
    assert await count_rows(Film) == 1
    assert await count_rows(Character) == 2
    assert await count_rows(FavoriteList) == 1


async def test_films_keep_request_order(client):
    res = await client.post(
        "/api/v1/lists", json={"listName": "Backwards", "films": [3, 1]},
    )

    titles = [f["title"] for f in res.json()["list"]["films"]]
    assert titles == ["Return of the Jedi", "A New Hope"]


async def test_existing_film_is_reused_not_duplicated(client, catalog, count_rows):
    first = await client.post(
        "/api/v1/lists", json={"listName": "One", "films": [1]},
    )
    calls_after_first = len(catalog.calls)
    second = await client.post(
        "/api/v1/lists", json={"listName": "Two", "films": [1]},
    )

    assert second.status_code == 201
    assert await count_rows(Film) == 1
    assert await count_rows(FavoriteList) == 2
    assert (
        first.json()["list"]["films"][0]["id"]
        == second.json()["list"]["films"][0]["id"]
    )
    # reused film: only the film itself is fetched, not its characters
    assert catalog.calls[calls_after_first:] == [("film", 1)]


async def test_reused_film_still_returns_its_characters(client):
    await client.post("/api/v1/lists", json={"listName": "One", "films": [1]})
    res = await client.post(
        "/api/v1/lists", json={"listName": "Two", "films": [1]},
    )

    characters = res.json()["list"]["films"][0]["characters"]
    assert [c["name"] for c in characters] == ["Luke Skywalker", "Leia Organa"]


async def test_shared_character_references_same_row(client, count_rows):
    res = await client.post(
        "/api/v1/lists", json={"listName": "Saga", "films": [1, 2]},
    )

    films = res.json()["list"]["films"]
    leia_in_first = films[0]["characters"][1]
    leia_in_second = films[1]["characters"][0]
    assert leia_in_first["name"] == leia_in_second["name"] == "Leia Organa"
    assert leia_in_first["id"] == leia_in_second["id"]
    assert await count_rows(Character) == 3


async def test_same_list_name_creates_a_new_list(client, count_rows):
    await client.post("/api/v1/lists", json={"listName": "Dup", "films": [1]})
    await client.post("/api/v1/lists", json={"listName": "Dup", "films": [2]})

    assert await count_rows(FavoriteList) == 2


async def test_unknown_film_returns_404_and_keeps_earlier_rows(client, count_rows):
    res = await client.post(
        "/api/v1/lists", json={"listName": "Broken", "films": [1, 99]},
    )

    assert res.status_code == 404
    assert res.json()["message"] == "film not found"
    assert res.json()["error"]["code"] == "FILM_NOT_FOUND"
    assert await count_rows(Film) == 1
    assert await count_rows(Character) == 2
    assert await count_rows(FavoriteList) == 0


async def test_unknown_character_url_returns_film_not_found(
    client, catalog, count_rows,
):
    catalog.films[4] = {
        "title": "The Phantom Menace",
        "release_date": "1999-05-19",
        "characters": ["https://swapi.test/api/people/999/"],
    }

    res = await client.post(
        "/api/v1/lists", json={"listName": "Prequels", "films": [4]},
    )

    assert res.status_code == 404
    assert res.json()["message"] == "film not found"
    assert await count_rows(Film) == 0


async def test_atomic_mode_rolls_back_on_unknown_film(client, count_rows):
    app.dependency_overrides[get_settings] = lambda: Settings(
        atomic_list_creation=True,
    )

    res = await client.post(
        "/api/v1/lists", json={"listName": "Atomic", "films": [1, 99]},
    )

    assert res.status_code == 404
    assert await count_rows(Film) == 0
    assert await count_rows(Character) == 0
    assert await count_rows(FavoriteList) == 0


async def test_missing_body_fields_return_400(client, count_rows):
    res = await client.post("/api/v1/lists", json={"films": [1]})

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert await count_rows(FavoriteList) == 0


async def test_non_integer_film_ids_return_400(client):
    res = await client.post(
        "/api/v1/lists", json={"listName": "Bad", "films": ["one"]},
    )

    assert res.status_code == 400


async def test_empty_film_list_creates_empty_list(client):
    res = await client.post(
        "/api/v1/lists", json={"listName": "Empty", "films": []},
    )

    assert res.status_code == 201
    assert res.json()["list"]["films"] == []
