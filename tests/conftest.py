"""Test environment. Settings are read at import time, so these must be set before any app import."""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256-0123456789")
# Minimum bcrypt cost keeps the suite fast; production default is 12.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
