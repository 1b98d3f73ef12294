"""Association Tables: ordered many-to-many links Film↔Character and List↔Film.

Invariants:
    - Each link row has a surrogate autoincrement id
    - Relationships order by that id, so collections load in insertion order
    - No uniqueness on (parent, child): the same film may appear twice in a list
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from favorites_api.db.base import Base


film_characters = Table(
    "film_characters",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("film_id", Integer, ForeignKey("films.id"), nullable=False, index=True),
    Column(
        "character_id", Integer, ForeignKey("characters.id"),
        nullable=False, index=True,
    ),
)

list_films = Table(
    "list_films",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "list_id", Integer, ForeignKey("favorite_lists.id"),
        nullable=False, index=True,
    ),
    Column("film_id", Integer, ForeignKey("films.id"), nullable=False, index=True),
)
