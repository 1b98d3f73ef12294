"""Tests for the error hierarchy: status codes and response envelopes."""

from favorites_api.core.errors import (
    DatabaseError,
    ErrorCategory,
    FilmNotFoundError,
    ListNotFoundError,
    ResourceNotFoundError,
)


def test_film_not_found_is_404_with_wire_message():
    err = FilmNotFoundError(7)

    assert err.http_status == 404
    assert isinstance(err, ResourceNotFoundError)
    response = err.to_response()
    assert response["message"] == "film not found"
    assert response["error"]["code"] == "FILM_NOT_FOUND"
    assert response["error"]["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert response["error"]["context"]["film_id"] == 7


def test_list_not_found_carries_list_id():
    err = ListNotFoundError(42)

    assert err.http_status == 404
    assert err.list_id == 42
    assert err.to_response()["message"] == "list with selected id not found"
    assert err.to_response()["error"]["context"]["list_id"] == 42


def test_database_error_is_503_critical():
    err = DatabaseError("Connection or operational error", "execute")

    assert err.http_status == 503
    assert err.to_response()["error"]["severity"] == "critical"
    assert "execute" in err.message
