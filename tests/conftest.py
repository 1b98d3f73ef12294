"""Root conftest: shared test configuration."""

import os

# Tests never reach the real catalog or a real database
os.environ.setdefault("CATALOG_BASE_URL", "https://swapi.test/api")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
