"""Test package. Points the app at in-memory SQLite and cheap bcrypt before anything imports it."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "dev")
