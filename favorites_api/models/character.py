"""Character ORM: a person appearing in one or more films.

Invariants:
    - name is the dedup key (lookup-before-insert, no DB unique constraint)
    - Characters are never deleted or renamed
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from favorites_api.db.base import Base


class Character(Base):
    """Character row, shared by every film that references it."""
    __tablename__ = "characters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"Character(id={self.id!r}, name={self.name!r})"
