"""Export Table: pivots a list's films into character → film titles rows.

Invariants:
    - Pure function, no IO
    - Rows appear in first-seen order: films in list order, characters in film order
    - A character seen again gets ", <title>" appended to its existing row
    - A character appearing twice in one film gets that title twice
"""

from typing import Iterable, Protocol

from favorites_api.core.domain_types import FILM_TITLE_SEPARATOR, CharacterRow


class _NamedLike(Protocol):
    name: str


class _FilmLike(Protocol):
    title: str
    characters: Iterable[_NamedLike]


def build_character_table(films: Iterable[_FilmLike]) -> list[CharacterRow]:
    """Build (character name, comma-joined film titles) rows."""
    titles_by_name: dict[str, list[str]] = {}
    for film in films:
        for character in film.characters:
            titles_by_name.setdefault(character.name, []).append(film.title)
    return [
        (name, FILM_TITLE_SEPARATOR.join(titles))
        for name, titles in titles_by_name.items()
    ]
