"""Root conftest — shared test configuration."""

import os

# Never touch the local development database from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")
