"""Initial schema: characters, films, favorite_lists and their join tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "characters",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
    )
    op.create_index("ix_characters_name", "characters", ["name"])

    op.create_table(
        "films",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("release_date", sa.String(32), nullable=False),
    )
    op.create_index("ix_films_title", "films", ["title"])

    op.create_table(
        "favorite_lists",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("list_name", sa.String(255), nullable=False),
    )

    op.create_table(
        "film_characters",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("film_id", sa.Integer, sa.ForeignKey("films.id"), nullable=False),
        sa.Column(
            "character_id", sa.Integer, sa.ForeignKey("characters.id"), nullable=False,
        ),
    )
    op.create_index("ix_film_characters_film_id", "film_characters", ["film_id"])
    op.create_index(
        "ix_film_characters_character_id", "film_characters", ["character_id"],
    )

    op.create_table(
        "list_films",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "list_id", sa.Integer, sa.ForeignKey("favorite_lists.id"), nullable=False,
        ),
        sa.Column("film_id", sa.Integer, sa.ForeignKey("films.id"), nullable=False),
    )
    op.create_index("ix_list_films_list_id", "list_films", ["list_id"])
    op.create_index("ix_list_films_film_id", "list_films", ["film_id"])


def downgrade() -> None:
    op.drop_table("list_films")
    op.drop_table("film_characters")
    op.drop_table("favorite_lists")
    op.drop_table("films")
    op.drop_table("characters")
