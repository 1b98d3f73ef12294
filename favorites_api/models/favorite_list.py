"""FavoriteList ORM: a user-named, ordered collection of films.

Invariants:
    - A new row per creation request (list_name is not unique)
    - films load in request order
    - Films are shared across lists and never cascaded
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from favorites_api.db.base import Base
from favorites_api.models.associations import list_films


class FavoriteList(Base):
    """Favorite list aggregate root."""
    __tablename__ = "favorite_lists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    list_name: Mapped[str] = mapped_column(String(255), nullable=False)

    films: Mapped[list["Film"]] = relationship(
        "Film", secondary=list_films,
        order_by=list_films.c.id, lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"FavoriteList(id={self.id!r}, list_name={self.list_name!r})"
