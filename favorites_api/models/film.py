"""Film ORM: a catalog film with its ordered cast of characters.

Invariants:
    - title is the dedup key (lookup-before-insert, no DB unique constraint)
    - characters load in the order they were attached
    - A Film owns no Character: characters are shared and never cascaded
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from favorites_api.db.base import Base
from favorites_api.models.associations import film_characters


class Film(Base):
    """Film row, shared by every list that references it."""
    __tablename__ = "films"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    release_date: Mapped[str] = mapped_column(String(32), nullable=False)

    characters: Mapped[list["Character"]] = relationship(
        "Character", secondary=film_characters,
        order_by=film_characters.c.id, lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"Film(id={self.id!r}, title={self.title!r})"
