"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ListId is the local primary key of a favorite list
    - CatalogFilmId is the external catalog's numeric film id, never a local Film.id
    - CharacterRow is one export line: (character name, comma-joined film titles)
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ListId = NewType("ListId", int)
CatalogFilmId = NewType("CatalogFilmId", int)


# ─── Value Types ─────────────────────────────────────────────────

CharacterRow = tuple[str, str]

FILM_TITLE_SEPARATOR = ", "
