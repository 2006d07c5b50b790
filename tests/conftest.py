"""Root conftest — shared test configuration."""

import os

# Settings are read at import time by game_catalog.main; point them at test values
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-tokens-32bytes!")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
