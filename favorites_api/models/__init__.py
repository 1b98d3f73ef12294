"""ORM Models: SQLAlchemy declarative models for characters, films and lists.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() targets resolve
      before any query runs
"""

from favorites_api.models.associations import film_characters, list_films  # noqa: F401
from favorites_api.models.character import Character  # noqa: F401
from favorites_api.models.film import Film  # noqa: F401
from favorites_api.models.favorite_list import FavoriteList  # noqa: F401
